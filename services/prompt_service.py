"""
매니저 피드백 코칭용 프롬프트 구성

리뷰 유형과 프레임워크 선호도를 각각 조회 테이블로 분기한 뒤
system / user 지시문 한 쌍(PromptBundle)을 만듭니다.
입력이 같으면 항상 같은 텍스트가 나오며, 모델 호출 없이 테스트할 수 있습니다.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from schemas.feedback import FeedbackRequest, FrameworkPreference, ReviewType


@dataclass(frozen=True)
class Rubric:
    name: str
    items: Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class ReviewProfile:
    label: str
    temperature: float
    max_tokens: int
    example_sentences: str
    example_subject: str


@dataclass(frozen=True)
class FrameworkGuide:
    guidance: str
    example_style: str


@dataclass(frozen=True)
class PromptBundle:
    system_instruction: str
    user_instruction: str
    temperature: float
    max_tokens: int

    def to_messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_instruction},
            {"role": "user", "content": self.user_instruction},
        ]


# --- 루브릭 ---
AD_HOC_RUBRIC = Rubric(
    name="Ad-hoc feedback rubric",
    items=(
        ("Clarity", "the main point is easy to find and understand"),
        ("Specificity", "names specific, observable behavior rather than traits"),
        ("Tone", "respectful, supportive and bias-aware wording"),
        ("Actionability", "ends with at least one clear next step"),
        ("Structure", "moves in a logical order the employee can follow"),
    ),
)

REVIEW_RUBRIC = Rubric(
    name="Performance review rubric",
    items=(
        ("Goals alignment", "ties performance to the goals agreed for the period"),
        ("Evidence", "backs each judgment with concrete examples or results"),
        ("Balance", "recognizes strengths alongside areas for growth"),
        ("Development plan", "sets forward-looking development goals and support"),
        ("Fairness", "avoids bias, recency effects and unsupported generalizations"),
    ),
)

REVIEW_RUBRICS: Dict[str, Rubric] = {
    ReviewType.AD_HOC.value: AD_HOC_RUBRIC,
    ReviewType.MID_YEAR.value: REVIEW_RUBRIC,
    ReviewType.ANNUAL.value: REVIEW_RUBRIC,
}

# 리뷰 유형별 샘플링 온도, 최대 출력 길이, 예시 문장 수
REVIEW_PROFILES: Dict[str, ReviewProfile] = {
    ReviewType.AD_HOC.value: ReviewProfile(
        label="Ad-hoc feedback",
        temperature=0.5,
        max_tokens=600,
        example_sentences="4-6",
        example_subject="what the manager should say to",
    ),
    ReviewType.MID_YEAR.value: ReviewProfile(
        label="Mid-year review",
        temperature=0.3,
        max_tokens=800,
        example_sentences="6-8",
        example_subject="the mid-year review comment the manager should give",
    ),
    ReviewType.ANNUAL.value: ReviewProfile(
        label="Annual review",
        temperature=0.3,
        max_tokens=900,
        example_sentences="8-10",
        example_subject="the annual review summary the manager should give",
    ),
}

# --- 프레임워크별 문구 가이드 ---
FRAMEWORK_GUIDANCE: Dict[FrameworkPreference, FrameworkGuide] = {
    FrameworkPreference.SBI: FrameworkGuide(
        guidance=(
            "Framework: SBI (Situation-Behavior-Impact). Name the situation, describe the "
            "observable behavior, explain its impact, then give one clear next step."
        ),
        example_style="using SBI and one clear next step",
    ),
    FrameworkPreference.SBI_SMART: FrameworkGuide(
        guidance=(
            "Framework: SBI + SMART. Use SBI (Situation-Behavior-Impact) to describe what "
            "happened, then write the next step as a SMART goal: Specific, Measurable, "
            "Achievable, Relevant and Time-bound (include an owner and a date)."
        ),
        example_style="using SBI and ending with one SMART next step",
    ),
    FrameworkPreference.FEEDFORWARD: FrameworkGuide(
        guidance=(
            "Framework: Feedforward. Keep any reference to the past brief and focus on the "
            "future: suggest concrete things the employee can try next time and describe "
            "what success will look like."
        ),
        example_style="in a feedforward style focused on what to try next",
    ),
    FrameworkPreference.NONE: FrameworkGuide(
        guidance=(
            "Framework: no forced framework. Use whatever structure reads most naturally, "
            "as long as the feedback stays specific, respectful and actionable."
        ),
        example_style="with one clear next step",
    ),
}

DEFAULT_GUIDELINES = """Feedback principles:
- Describe specific, observable behavior, not personality traits.
- Connect the behavior to its effect on the team, customers or results.
- Be timely: refer to recent, concrete moments.
- Keep a respectful, bias-aware tone; avoid absolutes like "always" and "never".
- Balance recognition with growth areas and keep the conversation two-way.

Techniques:
- Open by stating the purpose of the conversation.
- Use short sentences and plain language; avoid jargon.
- Agree on one clear next step and how progress will be followed up.
- Close with an open question that invites the employee's view."""

SYSTEM_TEMPLATE = """You are a feedback coach for managers practicing performance conversations in an e-learning module.
Evaluate the manager's draft against the rubric and then produce an improved example of how to say it.
Prefer specific, observable behavior, a respectful and bias-aware tone, and concise phrasing.

Module guidelines:
{guidelines}{persona_block}"""

USER_TEMPLATE = """Manager Name: {manager_name}
Employee: {employee_name}
Review Type: {review_label}{context_block}
Manager's draft feedback:
\"\"\"{draft_text}\"\"\"

Rubric ({rubric_name}):
{rubric_block}

{framework_guidance}

Return EXACTLY these sections:

1) Evaluation (Score each 0-5 with a one-line justification per item)
{evaluation_block}

1-2 sentence overall verdict.

2) Improved Example ({example_subject} {employee_name})
- {example_sentences} sentences total, {example_style}.
- Supportive, direct, and specific. Avoid jargon.

3) Reflection Prompt
- 1 line only."""

FEEDBACK_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", SYSTEM_TEMPLATE),
        ("human", USER_TEMPLATE),
    ]
)


def select_rubric(review_type: str) -> Rubric:
    return REVIEW_RUBRICS.get(review_type, AD_HOC_RUBRIC)


def select_profile(review_type: str) -> ReviewProfile:
    return REVIEW_PROFILES.get(review_type, REVIEW_PROFILES[ReviewType.AD_HOC.value])


def select_framework(preference: FrameworkPreference) -> FrameworkGuide:
    return FRAMEWORK_GUIDANCE.get(preference, FRAMEWORK_GUIDANCE[FrameworkPreference.SBI])


def _context_block(request: FeedbackRequest) -> str:
    lines = []
    if request.scenario_id and request.scenario_id.strip():
        lines.append(f"Scenario: {request.scenario_id.strip()}")
    if request.competencies:
        lines.append(f"Competencies in focus: {', '.join(request.competencies)}")
    return "".join(f"\n{line}" for line in lines)


def _guidelines(request: FeedbackRequest) -> str:
    if request.module_guidelines and request.module_guidelines.strip():
        return request.module_guidelines
    return DEFAULT_GUIDELINES


def _message_text(message: BaseMessage) -> str:
    return str(message.content)


def compose_feedback_prompt(request: FeedbackRequest, persona: str = "") -> PromptBundle:
    """검증된 요청과 페르소나로 system / user 지시문을 만듭니다."""
    rubric = select_rubric(request.review_type)
    profile = select_profile(request.review_type)
    framework = select_framework(request.framework_preference)

    system_message, user_message = FEEDBACK_PROMPT.format_messages(
        guidelines=_guidelines(request),
        persona_block=f"\nPersona: {persona}" if persona else "",
        manager_name=request.manager_name,
        employee_name=request.employee_name,
        review_label=profile.label,
        context_block=_context_block(request),
        draft_text=request.draft_text,
        rubric_name=rubric.name,
        rubric_block="\n".join(f"- {label}: {desc}" for label, desc in rubric.items),
        framework_guidance=framework.guidance,
        evaluation_block="\n".join(f"- {label}:" for label, _ in rubric.items),
        example_subject=profile.example_subject,
        example_sentences=profile.example_sentences,
        example_style=framework.example_style,
    )

    return PromptBundle(
        system_instruction=_message_text(system_message),
        user_instruction=_message_text(user_message),
        temperature=profile.temperature,
        max_tokens=profile.max_tokens,
    )
