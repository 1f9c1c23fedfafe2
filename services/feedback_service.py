import logging
from typing import Any

from schemas.feedback import FeedbackResponse
from services.completion_client import CompletionClient
from services.persona_service import resolve_persona
from services.prompt_service import compose_feedback_prompt
from services.validation import validate_feedback_payload

logger = logging.getLogger(__name__)


class FeedbackService:
    # 검증 → 페르소나 → 프롬프트 구성 → 업스트림 호출 순서
    async def coach_feedback(self, payload: Any, client: CompletionClient) -> FeedbackResponse:
        request = validate_feedback_payload(payload)

        persona = resolve_persona(request.employee_name)
        bundle = compose_feedback_prompt(request, persona)
        logger.info(
            "Composed feedback prompt: review_type=%s framework=%s persona=%s",
            request.review_type,
            request.framework_preference.value,
            bool(persona),
        )

        result = await client.complete(bundle)
        return FeedbackResponse(response=result.text)
