"""Assessment scoring and risk classification engine.

Pure functions mapping an assessment type and raw responses onto a total
score, severity label, risk flags and completion status. No I/O.

Scoring is table driven: ``SCORING_RULES`` maps each type id onto a
``ScoringRule`` holding the severity step function and the risk rules.
"""

import re
from collections.abc import Mapping
from typing import Any

from assessment_hub.scoring import bai, bdi2, gad7, pcl5, phq9
from assessment_hub.scoring.base import (
    UNKNOWN_LABEL,
    AssessmentStatus,
    LabeledResponse,
    ScoringResult,
    ScoringRule,
)
from assessment_hub.scoring.registry import find_template

SCORING_RULES: dict[str, ScoringRule] = {
    phq9.TYPE_ID: phq9.RULE,
    gad7.TYPE_ID: gad7.RULE,
    bdi2.TYPE_ID: bdi2.RULE,
    bai.TYPE_ID: bai.RULE,
    pcl5.TYPE_ID: pcl5.RULE,
}

# Accepted answer range; every instrument scores items from 0 upwards.
# Values inside the range but not among a question's options label as Unknown.
MIN_RESPONSE_VALUE = 0
MAX_RESPONSE_VALUE = 1000

MAX_QUESTION_ID = 1000

_QUESTION_ID_PATTERN = re.compile(r"[0-9]+")


class ResponseValidationError(Exception):
    """Raised when a responses mapping is malformed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid responses: " + "; ".join(errors))


def _parse_question_id(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, str):
        key = key.strip()
        # ASCII digits only; str.isdigit also accepts superscripts
        if len(key) > 6 or not _QUESTION_ID_PATTERN.fullmatch(key):
            return None
        key = int(key)
    if not isinstance(key, int) or not 1 <= key <= MAX_QUESTION_ID:
        return None
    return key


def normalize_responses(responses: Mapping[Any, Any]) -> dict[int, int]:
    """Validate a raw responses mapping and convert keys to integers.

    Keys may be integers or strings of ASCII digits (JSON object keys arrive
    as strings) between 1 and MAX_QUESTION_ID. Values must be integers
    between MIN_RESPONSE_VALUE and MAX_RESPONSE_VALUE; booleans, floats,
    strings and None are rejected rather than coerced.

    Raises:
        ResponseValidationError: Listing every malformed entry.
    """
    if not isinstance(responses, Mapping):
        raise ResponseValidationError(["responses must be a mapping of question id to value"])

    normalized: dict[int, int] = {}
    errors: list[str] = []

    for key, value in responses.items():
        question_id = _parse_question_id(key)
        if question_id is None:
            errors.append(f"question id {key!r} is not a valid question number")
            continue
        if question_id in normalized:
            errors.append(f"question {question_id} answered more than once")
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(f"question {question_id} value {value!r} is not an integer")
            continue
        if not MIN_RESPONSE_VALUE <= value <= MAX_RESPONSE_VALUE:
            errors.append(
                f"question {question_id} value is outside "
                f"{MIN_RESPONSE_VALUE}..{MAX_RESPONSE_VALUE}"
            )
            continue
        normalized[question_id] = value

    if errors:
        raise ResponseValidationError(errors)

    return normalized


def score_responses(type_id: str, responses: Mapping[Any, Any]) -> ScoringResult:
    """Score responses for an assessment type.

    Absent questions contribute nothing. Types without a scoring rule get an
    empty severity, no flags and a completed status.

    Raises:
        ResponseValidationError: If responses are malformed.
    """
    answers = normalize_responses(responses)
    total = sum(answers.values())

    rule = SCORING_RULES.get(type_id)
    if rule is None:
        return ScoringResult(total_score=total, severity="")

    risk_flags: list[str] = []
    status = AssessmentStatus.COMPLETED

    for flag_rule in rule.flag_rules:
        if not flag_rule.predicate(total, answers):
            continue
        if flag_rule.flag and flag_rule.flag not in risk_flags:
            risk_flags.append(flag_rule.flag)
        if flag_rule.forces_flagged:
            status = AssessmentStatus.FLAGGED

    return ScoringResult(
        total_score=total,
        severity=rule.classify(total),
        risk_flags=risk_flags,
        status=status,
    )


def label_responses(type_id: str, responses: Mapping[Any, Any]) -> list[LabeledResponse]:
    """Attach option labels to responses, ordered by question id.

    Never fails on lookup misses: an unregistered type, unknown question or
    unmatched value yields the "Unknown" label.

    Raises:
        ResponseValidationError: If responses are malformed.
    """
    answers = normalize_responses(responses)
    template = find_template(type_id)

    labeled = []
    for question_id, value in sorted(answers.items()):
        label = UNKNOWN_LABEL
        question = template.get_question(question_id) if template else None
        if question is not None:
            option = question.get_option(value)
            if option is not None:
                label = option.label
        labeled.append(LabeledResponse(question_id=question_id, value=value, label=label))

    return labeled
