import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.logging_config import setup_logging
from config.settings import settings
from middleware.origin_guard import OriginGuardMiddleware
from routers import coach_router, feedback_router
from services.errors import RequestValidationFailed, UpstreamError, UpstreamTransportError

setup_logging()
logger = logging.getLogger(__name__)

SERVER_ERROR = {"error": "Server error"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.has_api_key:
        logger.warning("OPENAI_API_KEY is not set; upstream calls will be rejected")
    logger.info("Feedback Coaching Gateway ready (model=%s)", settings.OPENAI_MODEL)
    yield


app = FastAPI(
    title="Feedback Coaching Gateway",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS 설정: 허용된 프론트엔드만
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.ALLOWED_ORIGINS),
    allow_methods=list(settings.ALLOWED_METHODS),
    allow_headers=list(settings.ALLOWED_HEADERS),
)
# 마지막에 추가된 미들웨어가 가장 바깥에서 실행됨
app.add_middleware(OriginGuardMiddleware, allowed_origins=settings.ALLOWED_ORIGINS)

# 라우터
app.include_router(coach_router.router, prefix="/api")
app.include_router(feedback_router.router, prefix="/api")


# 오류 처리
@app.exception_handler(RequestValidationFailed)
async def handle_validation_failed(request: Request, exc: RequestValidationFailed):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(UpstreamError)
async def handle_upstream_error(request: Request, exc: UpstreamError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.body})


@app.exception_handler(UpstreamTransportError)
async def handle_transport_error(request: Request, exc: UpstreamTransportError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content=SERVER_ERROR)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=SERVER_ERROR)


# 헬스체크
@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
