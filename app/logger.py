# logger.py
import logging

from app.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)

logger = logging.getLogger("chainproof")


def get_logger(name: str) -> logging.Logger:
    return logger.getChild(name)
