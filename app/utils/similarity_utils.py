from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from app.config import SIMILARITY_FLAG_THRESHOLD
from app.logger import get_logger
from app.schemas.submission_schemas import (
    CorpusEntry,
    MatchResult,
    Paragraph,
    SimilaritySource,
)

logger = get_logger("similarity")


def _percent(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total * 100.0


def _eligible_entries(
    corpus: Iterable[CorpusEntry], exclude_author_id: Optional[str]
) -> List[Tuple[CorpusEntry, FrozenSet[str]]]:
    """Corpus entries that may be credited, in iteration order, with their hash sets."""
    eligible: List[Tuple[CorpusEntry, FrozenSet[str]]] = []
    for entry in corpus:
        if exclude_author_id is not None and entry.authorId == exclude_author_id:
            continue
        if entry.paragraphHashes is None:
            logger.warning(f"Skipping corpus entry {entry.id}: no paragraph hashes")
            continue
        eligible.append((entry, frozenset(entry.paragraphHashes)))
    return eligible


def match(
    paragraphs: List[Paragraph],
    corpus: Iterable[CorpusEntry],
    exclude_author_id: Optional[str],
) -> MatchResult:
    """
    Cross-reference a new document's paragraphs against prior submissions.

    Each paragraph is credited to at most one prior document: the first entry,
    in corpus order, holding a bit-for-bit equal hash. Entries written by
    ``exclude_author_id`` never count. Percentages are taken over the new
    document's paragraph count, and are 0 when it has no paragraphs.

    Neither ``paragraphs`` nor ``corpus`` is modified; annotated copies are
    returned.
    """
    eligible = _eligible_entries(corpus, exclude_author_id)

    annotated: List[Paragraph] = []
    counts: Dict[str, int] = {}
    discovered: Dict[str, CorpusEntry] = {}

    for paragraph in paragraphs:
        source = next((entry for entry, hashes in eligible if paragraph.hash in hashes), None)
        if source is None:
            annotated.append(paragraph.model_copy())
            continue

        annotated.append(paragraph.model_copy(update={
            "isPlagiarized": True,
            "sourceDocumentId": source.id,
        }))
        if source.id not in discovered:
            discovered[source.id] = source
            counts[source.id] = 0
        counts[source.id] += 1

    total = len(paragraphs)
    matched = sum(counts.values())
    sources = [
        SimilaritySource(
            documentId=doc_id,
            documentTitle=entry.title,
            authorName=entry.authorName,
            similarityPercentage=_percent(counts[doc_id], total),
        )
        for doc_id, entry in discovered.items()
    ]

    logger.info(
        f"Matched {matched}/{total} paragraphs against {len(eligible)} prior submissions "
        f"({len(sources)} sources)"
    )
    return MatchResult(
        annotatedParagraphs=annotated,
        overallSimilarity=_percent(matched, total),
        sources=sources,
    )


def classify_status(similarity: float, threshold: float = SIMILARITY_FLAG_THRESHOLD) -> str:
    """Display label for a similarity score: 'flagged' above the threshold, else 'verified'."""
    return "flagged" if similarity > threshold else "verified"
