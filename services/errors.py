from typing import Any


class GatewayError(Exception):
    """게이트웨이에서 발생하는 모든 오류의 기반 클래스"""


class RequestValidationFailed(GatewayError):
    # 필수 필드 누락 → 400
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamError(GatewayError):
    # 모델 API가 2xx 이외의 상태를 반환 → 상태 코드와 본문을 그대로 전달
    def __init__(self, status_code: int, body: Any):
        super().__init__(f"Upstream returned {status_code}")
        self.status_code = status_code
        self.body = body


class UpstreamTransportError(GatewayError):
    # 네트워크 오류, 타임아웃, 형식이 깨진 응답 → 500 (상세 내용은 로그로만)
    pass
