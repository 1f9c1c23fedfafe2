from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from routers.body import read_json_body
from services.coach_service import CoachService
from services.completion_client import CompletionClient, get_completion_client

router = APIRouter()
coach_service = CoachService()

# AI 코치: 프롬프트를 그대로 모델에 전달하고 응답을 그대로 반환
@router.post("/coach")
async def ask_ai_coach(
    request: Request,
    client: CompletionClient = Depends(get_completion_client),
):
    payload = await read_json_body(request)
    status_code, body = await coach_service.ask_coach(payload, client)
    return JSONResponse(status_code=status_code, content=body)
