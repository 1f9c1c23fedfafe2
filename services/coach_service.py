from typing import Any, Tuple

from services.completion_client import CompletionClient
from services.validation import validate_coach_payload

COACH_TEMPERATURE = 0.7


class CoachService:
    async def ask_coach(self, payload: Any, client: CompletionClient) -> Tuple[int, Any]:
        """프롬프트를 템플릿 없이 그대로 모델에 전달합니다."""
        request = validate_coach_payload(payload)
        return await client.relay(
            [{"role": "user", "content": request.prompt}],
            temperature=COACH_TEMPERATURE,
        )
