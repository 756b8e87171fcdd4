import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from bloodwork_api.config import settings
from bloodwork_api.database import get_db
from bloodwork_api.routers.deps import get_upload_limiter
from bloodwork_api.services.errors import MissingInputError, PersistenceError
from bloodwork_api.services.pipeline import run_screening
from bloodwork_api.services.rate_limit import UploadRateLimiter
from bloodwork_api.services.storage import list_screenings, save_screening

router = APIRouter(prefix="/api/bloodwork-screening", tags=["bloodwork-screening"])
logger = logging.getLogger(__name__)

SAVE_WARNING = "Results processed but could not be saved to database."


@router.post("")
async def upload_screening(
    file: UploadFile | None = File(default=None),
    user_id: str | None = Form(default=None, alias="userId"),
    db: Session = Depends(get_db),
    limiter: UploadRateLimiter = Depends(get_upload_limiter),
):
    if file is None or not file.filename:
        raise MissingInputError("No file uploaded")
    if not user_id:
        raise MissingInputError("userId is required")

    limiter.check(user_id)

    file_bytes = await file.read()
    max_size_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(file_bytes) > max_size_bytes:
        raise HTTPException(status_code=400, detail=f"File too large. Max size is {settings.max_upload_size_mb}MB")

    result = await run_in_threadpool(run_screening, file_bytes, file.filename, user_id)

    data = result.model_dump(mode="json")
    try:
        data["id"] = await run_in_threadpool(save_screening, db, result)
    except PersistenceError as exc:
        logger.error("Database error saving screening for user %s: %s", user_id, exc.__cause__ or exc)
        data["id"] = None
        data["warning"] = SAVE_WARNING

    return {
        "statusCode": 200,
        "message": "Bloodwork processed successfully",
        "data": data,
    }


@router.get("")
def get_screenings(
    user_id: str | None = Query(default=None, alias="userId"),
    db: Session = Depends(get_db),
):
    if not user_id:
        raise MissingInputError("userId parameter is required")

    records = list_screenings(db, user_id)
    return {
        "statusCode": 200,
        "message": "Success",
        "data": [record.model_dump() for record in records],
    }
