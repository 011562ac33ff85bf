from fastapi import APIRouter, HTTPException, Depends
from typing import List

from app.dependencies.auth import require_role
from app.dependencies.database import SubmissionStore, get_submission_store
from app.schemas.report_schemas import ReportStats
from app.schemas.submission_schemas import SubmissionRecord, SubmissionSummary
from app.utils.report_utils import report_stats

router = APIRouter(prefix="/lecturer", tags=["lecturer-reports"])

allow_lecturer = require_role("lecturer", "admin")


@router.get("/reports", response_model=ReportStats)
async def reports(
    token_payload: dict = Depends(allow_lecturer),
    store: SubmissionStore = Depends(get_submission_store),
):
    return report_stats(await store.list_all())


@router.get("/submissions", response_model=List[SubmissionSummary])
async def all_submissions(
    token_payload: dict = Depends(allow_lecturer),
    store: SubmissionStore = Depends(get_submission_store),
):
    return await store.list_all()


@router.get("/submissions/{submission_id}", response_model=SubmissionRecord)
async def plagiarism_report(
    submission_id: str,
    token_payload: dict = Depends(allow_lecturer),
    store: SubmissionStore = Depends(get_submission_store),
):
    record = await store.get(submission_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Submission not found")
    return record
