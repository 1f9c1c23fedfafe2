from fastapi import APIRouter, Depends, Request

from routers.body import read_json_body
from schemas.feedback import FeedbackResponse
from services.completion_client import CompletionClient, get_completion_client
from services.feedback_service import FeedbackService

router = APIRouter()
feedback_service = FeedbackService()

# 매니저 피드백 초안 평가 + 개선 예시
@router.post("/ask", response_model=FeedbackResponse)
async def ask_feedback_coach(
    request: Request,
    client: CompletionClient = Depends(get_completion_client),
):
    payload = await read_json_body(request)
    return await feedback_service.coach_feedback(payload, client)
