from typing import Dict

_RIVERA = (
    "Alex Rivera values autonomy and concise feedback. "
    "Responds well to concrete examples and measurable next steps."
)

# 정규화된 직원 이름 → 톤 조정용 행동 프로필
PERSONAS: Dict[str, str] = {
    "jordan": (
        "Jordan is collaborative and positive, but underestimates task time. "
        "Benefits from clearer planning and milestone check-ins."
    ),
    "alex": (
        "Alex is detail-oriented and produces high quality work, but can get stuck polishing. "
        "Benefits from time-boxing and clear priorities."
    ),
    "taylor": (
        "Taylor is strong with customers but context switches often. "
        "Benefits from focused work blocks and explicit handoff notes."
    ),
    "rivera": _RIVERA,
    "alex rivera": _RIVERA,
}


def normalize_employee_key(employee_raw) -> str:
    if not isinstance(employee_raw, str):
        return ""
    return employee_raw.strip().casefold()


def resolve_persona(employee_raw) -> str:
    """직원 이름에 해당하는 페르소나 문장을 반환합니다. 모르는 이름이면 빈 문자열."""
    return PERSONAS.get(normalize_employee_key(employee_raw), "")
