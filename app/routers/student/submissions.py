from fastapi import APIRouter, UploadFile, File, Form, HTTPException, Depends
from typing import List
from pydantic import ValidationError

from app.dependencies.auth import verify_token
from app.dependencies.database import SubmissionStore, get_submission_store
from app.errors import ExtractionError, FileTooLargeError
from app.logger import get_logger
from app.schemas.submission_schemas import SubmissionMetadata, SubmissionRecord, SubmissionSummary
from app.utils.file_utils import allowed_file, check_file_size, extract_text_from_file
from app.utils.submission_utils import build_submission_record

router = APIRouter(prefix="/student", tags=["student-submissions"])
logger = get_logger("student_submissions")


@router.post("/submissions", response_model=SubmissionRecord)
async def submit_document(
    file: UploadFile = File(...),
    title: str = Form(...),
    courseCode: str = Form(...),
    documentType: str = Form("project"),
    description: str = Form(""),
    current_user: dict = Depends(verify_token),
    store: SubmissionStore = Depends(get_submission_store),
):
    try:
        metadata = SubmissionMetadata(
            title=title,
            courseCode=courseCode,
            documentType=documentType,
            description=description,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    if not file.filename or not allowed_file(file.filename):
        raise HTTPException(status_code=400, detail=f"Invalid file type: {file.filename}")

    try:
        # multipart uploads arrive spooled with a known size; skip reading oversized ones
        if file.size is not None:
            check_file_size(file.size, file.filename)
        raw = await file.read()
        check_file_size(len(raw), file.filename)
        text = extract_text_from_file(raw, file.filename)
    except FileTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ExtractionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info(f"📄 Processing {file.filename} for {current_user.get('sub')}")

    corpus = await store.load_corpus()
    record = build_submission_record(
        metadata, text, corpus, current_user, file_name=file.filename,
    )
    await store.append(record)

    logger.info(
        f"✅ {record.id}: {record.similarityScore:.2f}% similar, "
        f"{len(record.plagiarismSources)} sources, status={record.status}"
    )
    return record


@router.get("/submissions", response_model=List[SubmissionSummary])
async def my_submissions(
    current_user: dict = Depends(verify_token),
    store: SubmissionStore = Depends(get_submission_store),
):
    return await store.list_by_author(current_user["sub"])


@router.get("/submissions/{submission_id}", response_model=SubmissionRecord)
async def my_submission(
    submission_id: str,
    current_user: dict = Depends(verify_token),
    store: SubmissionStore = Depends(get_submission_store),
):
    record = await store.get(submission_id)
    if record is None or record.authorId != current_user["sub"]:
        raise HTTPException(status_code=404, detail="Submission not found")
    return record
