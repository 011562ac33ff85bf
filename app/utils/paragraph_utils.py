import hashlib
import re
from typing import List

from app.config import MIN_PARAGRAPH_LENGTH
from app.schemas.submission_schemas import Paragraph

# Line breaks, plus the form feed pdfminer places between pages.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n|\f")


def hash_text(text: str) -> str:
    """SHA-256 hex digest of the exact UTF-8 bytes of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def split_fragments(raw_text: str) -> List[str]:
    return _LINE_BREAK_RE.split(raw_text or "")


def segment(raw_text: str, min_length: int = MIN_PARAGRAPH_LENGTH) -> List[Paragraph]:
    """
    Split extracted document text into hashed paragraphs, in document order.

    A fragment counts as a paragraph only when its stripped length exceeds
    ``min_length``; shorter ones are blank lines or page artifacts. The hash
    covers the fragment exactly as split, so paragraphs that differ in case,
    punctuation or surrounding spaces hash differently.
    """
    paragraphs: List[Paragraph] = []
    for fragment in split_fragments(raw_text):
        if len(fragment.strip()) <= min_length:
            continue
        paragraphs.append(Paragraph(text=fragment, hash=hash_text(fragment)))
    return paragraphs


def paragraph_hashes(paragraphs: List[Paragraph]) -> List[str]:
    return [p.hash for p in paragraphs]
