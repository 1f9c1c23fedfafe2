from typing import Any

from fastapi import Request


async def read_json_body(request: Request) -> Any:
    # JSON이 아니거나 비어 있는 본문은 빈 객체로 취급 → 필수 필드 검증에서 400
    try:
        return await request.json()
    except ValueError:
        return {}
