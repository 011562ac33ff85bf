import io
import zipfile
from typing import Optional
from pdfminer.high_level import extract_text as extract_pdf_text
from pdfminer.psparser import PSException
from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError

from app.config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE_MB
from app.errors import ExtractionError, FileTooLargeError
from app.logger import get_logger

logger = get_logger("extraction")


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[1].lower() if "." in filename else ""


def allowed_file(filename: str) -> bool:
    return file_extension(filename) in ALLOWED_EXTENSIONS


def check_file_size(size_bytes: int, filename: str, max_mb: Optional[int] = None) -> None:
    limit_mb = MAX_FILE_SIZE_MB if max_mb is None else max_mb
    if size_bytes > limit_mb * 1024 * 1024:
        raise FileTooLargeError(filename, size_bytes, limit_mb)


def extract_text_from_file(content_bytes: bytes, filename: str) -> str:
    """
    Decode an uploaded document into plain text.

    Raises ExtractionError when the format is unsupported, the document cannot
    be parsed, or it holds no text at all (an image-only PDF, for example).
    """
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise ExtractionError(filename, f"unsupported file type '{ext}'")

    try:
        if ext == "txt":
            text = content_bytes.decode("utf-8", errors="ignore")
        elif ext == "pdf":
            text = extract_pdf_text(io.BytesIO(content_bytes))
        else:
            doc = DocxDocument(io.BytesIO(content_bytes))
            text = "\n".join(p.text for p in doc.paragraphs)
    except (PSException, PackageNotFoundError, zipfile.BadZipFile, ValueError, KeyError) as e:
        logger.warning(f"Extraction failed for {filename}: {e}")
        raise ExtractionError(filename, str(e)) from e

    if not text.strip():
        raise ExtractionError(filename)

    logger.info(f"Extracted {len(text.split())} words from {filename}")
    return text
