import logging
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """게이트웨이 프로세스의 루트 로거를 한 번 설정합니다."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL),
        format=LOG_FORMAT,
    )
