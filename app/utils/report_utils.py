from collections import Counter
from datetime import date
from typing import Dict, List, Sequence

from app.schemas.report_schemas import AdminStats, IntegrityReport, LabelCount, ReportStats
from app.schemas.submission_schemas import SubmissionSummary, SubmissionRecord
from app.utils.merkle_utils import build_digest
from app.utils.paragraph_utils import hash_text


def _by_count(counts: Dict[str, int]) -> List[LabelCount]:
    # sorted() is stable, so ties keep first-seen order
    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [LabelCount(label=label, value=value) for label, value in ordered]


def report_stats(records: Sequence[SubmissionSummary]) -> ReportStats:
    total = len(records)
    flagged = sum(1 for r in records if r.status == "flagged")
    average = sum(r.similarityScore for r in records) / total if total else 0.0
    courses = Counter(r.courseCode.strip().upper() or "N/A" for r in records)
    return ReportStats(
        total=total,
        flagged=flagged,
        averageScore=average,
        submissionsByCourse=_by_count(courses),
    )


def admin_stats(records: Sequence[SubmissionSummary]) -> AdminStats:
    statuses = Counter(r.status for r in records)
    return AdminStats(
        totalDocuments=len(records),
        verifiedDocuments=statuses["verified"],
        flaggedDocuments=statuses["flagged"],
        pendingDocuments=statuses["pending"],
        blockchainRecords=sum(1 for r in records if r.merkleRoot),
        totalAuthors=len({r.authorId for r in records}),
    )


def submissions_by_month(records: Sequence[SubmissionSummary]) -> List[LabelCount]:
    """Monthly submission counts, oldest month first, labelled like 'Oct 2026'."""
    counts = Counter(date(r.createdAt.year, r.createdAt.month, 1) for r in records)
    return [
        LabelCount(label=month.strftime("%b %Y"), value=value)
        for month, value in sorted(counts.items())
    ]


def submissions_by_university(records: Sequence[SubmissionSummary]) -> List[LabelCount]:
    return _by_count(Counter(r.university or "N/A" for r in records))


def verify_integrity(record: SubmissionRecord) -> IntegrityReport:
    """Rehash the stored paragraphs and rebuild the root to detect tampering."""
    hashes_valid = all(hash_text(p.text) == p.hash for p in record.paragraphs)
    recomputed = build_digest([p.hash for p in record.paragraphs])
    root_valid = recomputed == record.merkleRoot
    return IntegrityReport(
        submissionId=record.id,
        storedRoot=record.merkleRoot,
        recomputedRoot=recomputed,
        paragraphHashesValid=hashes_valid,
        rootValid=root_valid,
        valid=hashes_valid and root_valid,
    )
