"""Tests for request validation and FeedbackRequest normalization."""

import pytest

from schemas.feedback import FeedbackRequest, FrameworkPreference
from services.errors import RequestValidationFailed
from services.validation import (
    MISSING_INPUT,
    MISSING_PROMPT,
    validate_coach_payload,
    validate_feedback_payload,
)


class TestValidateFeedbackPayload:
    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"input": ""},
            {"input": "   \n\t"},
            {"input": None},
            {"input": 123},
            {"input": ["Good job."]},
            {"name": "Pat", "employee": "Jordan"},
            None,
            [],
            "Good job.",
        ],
    )
    def test_rejects_missing_or_invalid_input(self, payload):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate_feedback_payload(payload)
        assert exc_info.value.message == MISSING_INPUT

    def test_defaults_applied(self):
        request = validate_feedback_payload({"input": "Good job."})
        assert request.draft_text == "Good job."
        assert request.manager_name == "Manager"
        assert request.employee_name == "Employee"
        assert request.review_type == "ad-hoc"
        assert request.scenario_id is None
        assert request.competencies == []
        assert request.module_guidelines is None
        assert request.framework_preference is FrameworkPreference.SBI

    def test_all_fields_mapped_from_wire_names(self):
        request = validate_feedback_payload(
            {
                "input": "You missed the deadline.",
                "name": "Pat",
                "employee": "Jordan",
                "reviewType": "annual",
                "scenarioId": "scenario-3",
                "competencies": ["Planning", "Communication"],
                "moduleGuidelines": "Be kind.",
                "frameworkPreference": "SBI+SMART",
            }
        )
        assert request.manager_name == "Pat"
        assert request.employee_name == "Jordan"
        assert request.review_type == "annual"
        assert request.scenario_id == "scenario-3"
        assert request.competencies == ["Planning", "Communication"]
        assert request.module_guidelines == "Be kind."
        assert request.framework_preference is FrameworkPreference.SBI_SMART

    def test_draft_text_kept_verbatim(self):
        request = validate_feedback_payload({"input": "  keep {this} spacing  "})
        assert request.draft_text == "  keep {this} spacing  "


class TestFeedbackRequestNormalization:
    def test_blank_names_fall_back_to_defaults(self):
        request = FeedbackRequest.model_validate({"input": "x", "name": "  ", "employee": None})
        assert request.manager_name == "Manager"
        assert request.employee_name == "Employee"

    def test_unknown_review_type_kept(self):
        request = FeedbackRequest.model_validate({"input": "x", "reviewType": "quarterly"})
        assert request.review_type == "quarterly"

    def test_non_string_review_type_defaults(self):
        request = FeedbackRequest.model_validate({"input": "x", "reviewType": 7})
        assert request.review_type == "ad-hoc"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("SBI", FrameworkPreference.SBI),
            ("sbi+smart", FrameworkPreference.SBI_SMART),
            ("Feedforward", FrameworkPreference.FEEDFORWARD),
            ("none", FrameworkPreference.NONE),
            ("GROW", FrameworkPreference.SBI),
            (None, FrameworkPreference.SBI),
        ],
    )
    def test_framework_preference(self, raw, expected):
        request = FeedbackRequest.model_validate({"input": "x", "frameworkPreference": raw})
        assert request.framework_preference is expected

    def test_competencies_filtered(self):
        request = FeedbackRequest.model_validate(
            {"input": "x", "competencies": [" Ownership ", "", 5, None, "Teamwork"]}
        )
        assert request.competencies == ["Ownership", "Teamwork"]

    def test_single_competency_string_accepted(self):
        request = FeedbackRequest.model_validate({"input": "x", "competencies": "Ownership"})
        assert request.competencies == ["Ownership"]

    def test_non_string_optional_text_dropped(self):
        request = FeedbackRequest.model_validate(
            {"input": "x", "scenarioId": 12, "moduleGuidelines": {"a": 1}}
        )
        assert request.scenario_id is None
        assert request.module_guidelines is None


class TestValidateCoachPayload:
    def test_accepts_prompt(self):
        assert validate_coach_payload({"prompt": "Hi coach"}).prompt == "Hi coach"

    def test_whitespace_prompt_kept_verbatim(self):
        assert validate_coach_payload({"prompt": "  \n "}).prompt == "  \n "

    @pytest.mark.parametrize("payload", [{}, {"prompt": ""}, {"prompt": 5}, None])
    def test_rejects_missing_prompt(self, payload):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate_coach_payload(payload)
        assert exc_info.value.message == MISSING_PROMPT
