import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import httpx

from config.settings import settings
from services.errors import UpstreamError, UpstreamTransportError
from services.prompt_service import PromptBundle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionResult:
    text: str


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def extract_completion_text(data: Any) -> str:
    """chat completion 응답에서 첫 번째 선택지의 텍스트만 꺼내 공백을 제거합니다."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamTransportError(f"Malformed completion payload: {e!r}") from e
    if not isinstance(content, str):
        raise UpstreamTransportError(f"Completion content is not text: {type(content).__name__}")
    return content.strip()


class CompletionClient:
    """OpenAI 호환 chat completions API 호출 (재시도 없음, 명시적 타임아웃)"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.http_client = http_client
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.url = url or settings.CHAT_COMPLETIONS_URL
        self.model = model or settings.OPENAI_MODEL
        # 호출 전체(연결부터 본문 수신까지)에 적용되는 제한 시간
        self.timeout = timeout if timeout is not None else settings.UPSTREAM_TIMEOUT_SECONDS

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key or ''}",
        }

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        try:
            return await asyncio.wait_for(
                self.http_client.post(self.url, json=payload, headers=self._headers()),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise UpstreamTransportError(f"Upstream timed out: {e!r}") from e
        except httpx.HTTPError as e:
            raise UpstreamTransportError(f"Upstream request failed: {e!r}") from e

    async def relay(
        self,
        messages: List[Dict[str, str]],
        temperature: float,
        max_tokens: Optional[int] = None,
    ) -> Tuple[int, Any]:
        """업스트림 상태 코드와 본문을 가공 없이 돌려줍니다."""
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        response = await self._post(payload)
        body = _parse_body(response)
        if response.is_success and not isinstance(body, (dict, list)):
            raise UpstreamTransportError(
                f"Upstream returned non-JSON body with status {response.status_code}"
            )
        return response.status_code, body

    async def complete(self, bundle: PromptBundle) -> CompletionResult:
        status_code, body = await self.relay(
            bundle.to_messages(),
            temperature=bundle.temperature,
            max_tokens=bundle.max_tokens,
        )
        if not 200 <= status_code < 300:
            logger.warning("Upstream completion failed with status %s", status_code)
            raise UpstreamError(status_code, body)
        return CompletionResult(extract_completion_text(body))


def build_http_client(timeout: Optional[float] = None, transport=None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout if timeout is not None else settings.UPSTREAM_TIMEOUT_SECONDS),
        transport=transport,
    )


# FastAPI 의존성: 요청마다 클라이언트를 열고 응답 후 닫음
async def get_completion_client():
    async with build_http_client() as http_client:
        yield CompletionClient(http_client)
