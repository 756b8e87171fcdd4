import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bloodwork_api.models.screening import BloodworkScreening
from bloodwork_api.schemas.screening import ScreeningRecord, ScreeningResult
from bloodwork_api.services.errors import PersistenceError

logger = logging.getLogger(__name__)


def save_screening(db: Session, result: ScreeningResult) -> str:
    record = BloodworkScreening(
        user_id=result.user_id,
        file_name=result.file_name,
        results=result.model_dump(mode="json"),
    )
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as exc:
        db.rollback()
        raise PersistenceError("Failed to save bloodwork screening") from exc
    return record.id


def _to_record(row: BloodworkScreening) -> ScreeningRecord:
    results = row.results or {}
    return ScreeningRecord(
        id=row.id,
        user_id=row.user_id,
        file_name=row.file_name,
        uploaded_at=row.created_at.isoformat() if row.created_at else None,
        values=results.get("values") or [],
        summary=results.get("summary") or "",
        recommendations=results.get("recommendations") or [],
        flagged_count=results.get("flagged_count") or 0,
    )


def list_screenings(db: Session, user_id: str) -> list[ScreeningRecord]:
    try:
        rows = (
            db.query(BloodworkScreening)
            .filter(BloodworkScreening.user_id == user_id)
            .order_by(BloodworkScreening.created_at.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch bloodwork screenings for user %s", user_id)
        raise PersistenceError("Failed to fetch bloodwork screenings") from exc
    return [_to_record(row) for row in rows]
