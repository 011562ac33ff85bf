import os
from dotenv import load_dotenv

load_dotenv()

# ───── Database ─────
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/chainproof")
MONGODB_DB = os.getenv("MONGODB_DB", "chainproof")
SUBMISSIONS_COLLECTION = "submissions"

# ───── Auth ─────
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")

# ───── Paragraph matching ─────
MIN_PARAGRAPH_LENGTH = 10
SIMILARITY_FLAG_THRESHOLD = float(os.getenv("SIMILARITY_FLAG_THRESHOLD", "25"))

# ───── File support ─────
ALLOWED_EXTENSIONS = {"txt", "pdf", "docx"}
MAX_FILE_SIZE_MB = 10

# ───── Dashboards ─────
RECENT_SUBMISSIONS_LIMIT = 10

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
