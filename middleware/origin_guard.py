import logging
from typing import Iterable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def is_origin_allowed(origin, allowed: Iterable[str], own_origin: str = "") -> bool:
    """Origin 헤더가 없거나, 같은 출처이거나, 허용 목록에 있으면 통과"""
    if not origin:
        return True
    origin = origin.rstrip("/")
    if own_origin and origin == own_origin:
        return True
    return origin in allowed


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """허용되지 않은 출처의 요청을 라우터에 닿기 전에 거부합니다."""

    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = frozenset(o.rstrip("/") for o in allowed_origins)

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        host = request.headers.get("host", "")
        own_origin = f"{request.url.scheme}://{host}" if host else ""

        if not is_origin_allowed(origin, self.allowed_origins, own_origin):
            logger.warning("CORS blocked for origin: %s", origin)
            return JSONResponse(
                status_code=403,
                content={"error": f"CORS blocked for origin: {origin}"},
            )
        return await call_next(request)
