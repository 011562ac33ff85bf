from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List

from app.config import RECENT_SUBMISSIONS_LIMIT
from app.dependencies.auth import require_role
from app.dependencies.database import SubmissionStore, get_submission_store
from app.logger import get_logger
from app.schemas.report_schemas import AdminStats, AnalyticsReport, IntegrityReport
from app.schemas.submission_schemas import SubmissionSummary
from app.utils.report_utils import (
    admin_stats,
    submissions_by_month,
    submissions_by_university,
    verify_integrity,
)

router = APIRouter(prefix="/admin", tags=["admin-dashboard"])
logger = get_logger("admin")

allow_admin = require_role("admin")


@router.get("/stats", response_model=AdminStats)
async def stats(
    token_payload: dict = Depends(allow_admin),
    store: SubmissionStore = Depends(get_submission_store),
):
    return admin_stats(await store.list_all())


@router.get("/recent-submissions", response_model=List[SubmissionSummary])
async def recent_submissions(
    limit: int = Query(RECENT_SUBMISSIONS_LIMIT, ge=1, le=100),
    token_payload: dict = Depends(allow_admin),
    store: SubmissionStore = Depends(get_submission_store),
):
    return await store.recent(limit)


@router.get("/flagged", response_model=List[SubmissionSummary])
async def flagged_submissions(
    token_payload: dict = Depends(allow_admin),
    store: SubmissionStore = Depends(get_submission_store),
):
    return await store.list_flagged()


@router.get("/analytics", response_model=AnalyticsReport)
async def analytics(
    token_payload: dict = Depends(allow_admin),
    store: SubmissionStore = Depends(get_submission_store),
):
    records = await store.list_all()
    return AnalyticsReport(
        submissionsByMonth=submissions_by_month(records),
        submissionsByUniversity=submissions_by_university(records),
    )


@router.get("/verify/{submission_id}", response_model=IntegrityReport)
async def verify_submission(
    submission_id: str,
    token_payload: dict = Depends(allow_admin),
    store: SubmissionStore = Depends(get_submission_store),
):
    record = await store.get(submission_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Submission not found")

    report = verify_integrity(record)
    if not report.valid:
        logger.warning(f"⚠️  Integrity check failed for {submission_id}")
    return report
