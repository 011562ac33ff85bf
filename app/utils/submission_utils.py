import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from app.config import SIMILARITY_FLAG_THRESHOLD
from app.logger import get_logger
from app.schemas.submission_schemas import (
    CorpusEntry,
    MatchResult,
    SubmissionMetadata,
    SubmissionRecord,
)
from app.utils.merkle_utils import build_digest
from app.utils.paragraph_utils import paragraph_hashes, segment
from app.utils.similarity_utils import classify_status, match

logger = get_logger("submission")


def analyze_document(
    text: str,
    corpus: Iterable[CorpusEntry],
    author_id: Optional[str],
) -> Tuple[MatchResult, str]:
    """
    Segment → match → digest. The matcher and the digest builder consume the
    same ordered hash list produced by the segmenter.
    """
    paragraphs = segment(text)
    logger.info(f"Segmented document into {len(paragraphs)} paragraphs")

    result = match(paragraphs, corpus, author_id)
    merkle_root = build_digest(paragraph_hashes(paragraphs))
    logger.info(f"Similarity {result.overallSimilarity:.2f}%, merkle root {merkle_root[:12] or '-'}")
    return result, merkle_root


def build_submission_record(
    metadata: SubmissionMetadata,
    text: str,
    corpus: Iterable[CorpusEntry],
    author: dict,
    file_name: str = "",
    threshold: float = SIMILARITY_FLAG_THRESHOLD,
) -> SubmissionRecord:
    author_id = author.get("sub")
    result, merkle_root = analyze_document(text, corpus, author_id)

    return SubmissionRecord(
        id=uuid.uuid4().hex,
        title=metadata.title,
        courseCode=metadata.courseCode,
        documentType=metadata.documentType,
        description=metadata.description,
        authorId=author_id or "",
        authorName=author.get("name", ""),
        university=author.get("university", ""),
        createdAt=datetime.now(timezone.utc),
        fileName=file_name,
        fullText=text,
        paragraphs=result.annotatedParagraphs,
        merkleRoot=merkle_root,
        similarityScore=result.overallSimilarity,
        status=classify_status(result.overallSimilarity, threshold),
        plagiarismSources=result.sources,
    )
