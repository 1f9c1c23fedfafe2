import logging
from typing import Any, Mapping

from pydantic import ValidationError

from schemas.coach import CoachRequest
from schemas.feedback import FeedbackRequest
from services.errors import RequestValidationFailed

logger = logging.getLogger(__name__)

MISSING_INPUT = "Missing input"
MISSING_PROMPT = "Missing prompt"


def _field(payload: Any, field: str) -> Any:
    if not isinstance(payload, Mapping):
        return None
    return payload.get(field)


def _has_text(payload: Any, field: str) -> bool:
    # 공백만 있는 문자열도 거부
    value = _field(payload, field)
    return isinstance(value, str) and bool(value.strip())


def _has_string(payload: Any, field: str) -> bool:
    # 빈 문자열만 거부, 공백 프롬프트는 그대로 전달
    value = _field(payload, field)
    return isinstance(value, str) and value != ""


def validate_feedback_payload(payload: Any) -> FeedbackRequest:
    """/api/ask 본문 검증. 페르소나 조회나 프롬프트 구성 전에 호출되어야 합니다."""
    if not _has_text(payload, "input"):
        raise RequestValidationFailed(MISSING_INPUT)
    try:
        return FeedbackRequest.model_validate(payload)
    except ValidationError as e:
        logger.info("Rejected feedback payload: %s", e)
        raise RequestValidationFailed(MISSING_INPUT) from e


def validate_coach_payload(payload: Any) -> CoachRequest:
    if not _has_string(payload, "prompt"):
        raise RequestValidationFailed(MISSING_PROMPT)
    return CoachRequest(prompt=payload["prompt"])
