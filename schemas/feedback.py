from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewType(str, Enum):
    AD_HOC = "ad-hoc"
    MID_YEAR = "mid-year"
    ANNUAL = "annual"


class FrameworkPreference(str, Enum):
    SBI = "SBI"
    SBI_SMART = "SBI+SMART"
    FEEDFORWARD = "feedforward"
    NONE = "none"


_FRAMEWORK_ALIASES = {f.value.casefold(): f for f in FrameworkPreference}


def _text_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


class FeedbackRequest(BaseModel):
    """/api/ask 요청 본문. 필드명은 프론트엔드(JSON) 이름을 alias로 사용"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    draft_text: str = Field(alias="input")
    manager_name: str = Field(default="Manager", alias="name")
    employee_name: str = Field(default="Employee", alias="employee")
    review_type: str = Field(default=ReviewType.AD_HOC.value, alias="reviewType")
    scenario_id: Optional[str] = Field(default=None, alias="scenarioId")
    competencies: List[str] = Field(default_factory=list)
    module_guidelines: Optional[str] = Field(default=None, alias="moduleGuidelines")
    framework_preference: FrameworkPreference = Field(
        default=FrameworkPreference.SBI, alias="frameworkPreference"
    )

    @field_validator("draft_text")
    @classmethod
    def _draft_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("draft text must not be blank")
        return value

    @field_validator("manager_name", mode="before")
    @classmethod
    def _default_manager(cls, value: Any) -> str:
        return _text_or_none(value) or "Manager"

    @field_validator("employee_name", mode="before")
    @classmethod
    def _default_employee(cls, value: Any) -> str:
        return _text_or_none(value) or "Employee"

    # 알 수 없는 값은 그대로 두고, 루브릭 선택 시 ad-hoc으로 처리됨
    @field_validator("review_type", mode="before")
    @classmethod
    def _review_type(cls, value: Any) -> str:
        if isinstance(value, Enum):
            value = value.value
        return value if isinstance(value, str) else ReviewType.AD_HOC.value

    @field_validator("scenario_id", "module_guidelines", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("competencies", mode="before")
    @classmethod
    def _competency_list(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return []
        return [c.strip() for c in value if isinstance(c, str) and c.strip()]

    @field_validator("framework_preference", mode="before")
    @classmethod
    def _framework(cls, value: Any) -> FrameworkPreference:
        if isinstance(value, FrameworkPreference):
            return value
        if isinstance(value, str):
            return _FRAMEWORK_ALIASES.get(value.strip().casefold(), FrameworkPreference.SBI)
        return FrameworkPreference.SBI


class FeedbackResponse(BaseModel):
    response: str
