# feedback-coaching-gateway/config/settings.py

import os
from typing import Optional, Tuple
from dotenv import load_dotenv

load_dotenv()

# 허용된 프론트엔드 (Captivate 코스, 포트폴리오, 로컬 개발 서버)
DEFAULT_ALLOWED_ORIGINS = (
    "https://tonydemos.s3.us-east-2.amazonaws.com",
    "https://portfolio.visiomediatech.com",
    "https://tonymosby360photography.com",
    "https://www.tonymosby360photography.com",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
)


def _split_origins(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    origins = tuple(o.strip().rstrip("/") for o in raw.split(",") if o.strip())
    return origins or DEFAULT_ALLOWED_ORIGINS


class GatewayConfig:
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30"))

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    ALLOWED_ORIGINS = _split_origins(os.getenv("ALLOWED_ORIGINS"))
    ALLOWED_METHODS = ("GET", "POST", "OPTIONS")
    ALLOWED_HEADERS = ("Content-Type", "Authorization")

    @property
    def CHAT_COMPLETIONS_URL(self):
        return f"{self.OPENAI_BASE_URL.rstrip('/')}/chat/completions"

    @property
    def has_api_key(self) -> bool:
        return bool(self.OPENAI_API_KEY)


settings = GatewayConfig()


if __name__ == "__main__":
    # 설정 확인용: 키 값 자체는 출력하지 않음
    print(f"Upstream URL: {settings.CHAT_COMPLETIONS_URL}")
    print(f"Model: {settings.OPENAI_MODEL}")
    print(f"Allowed origins: {', '.join(settings.ALLOWED_ORIGINS)}")
    if not settings.has_api_key:
        print("OPENAI_API_KEY 환경 변수가 설정되지 않았습니다. .env 파일을 확인하세요.")
