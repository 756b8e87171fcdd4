import logging
from datetime import datetime, timezone

from bloodwork_api.schemas.screening import ScreeningResult
from bloodwork_api.services.classifier import analyze_measurement
from bloodwork_api.services.errors import NoValuesFoundError
from bloodwork_api.services.summarizer import generate_summary
from bloodwork_api.services.text_extraction import extract_text
from bloodwork_api.services.value_extractor import extract_values

logger = logging.getLogger(__name__)


def analyze_text(text: str, user_id: str, file_name: str) -> ScreeningResult:
    measurements = extract_values(text)
    if not measurements:
        raise NoValuesFoundError(text)

    values = [analyze_measurement(item) for item in measurements]
    summary, recommendations = generate_summary(values)
    result = ScreeningResult(
        user_id=user_id,
        file_name=file_name,
        uploaded_at=datetime.now(timezone.utc),
        values=values,
        summary=summary,
        recommendations=recommendations,
    )
    logger.info(
        "Screened %s for user %s: %d values, %d flagged",
        file_name,
        user_id,
        len(values),
        result.flagged_count,
    )
    return result


def run_screening(file_bytes: bytes, file_name: str, user_id: str) -> ScreeningResult:
    text = extract_text(file_bytes, file_name)
    return analyze_text(text, user_id=user_id, file_name=file_name)
