"""Questionnaire templates and scoring for validated clinical instruments."""

from assessment_hub.scoring.base import (
    UNKNOWN_LABEL,
    AssessmentStatus,
    AssessmentTemplate,
    LabeledResponse,
    Option,
    Question,
    ScoringResult,
    ScoringRule,
)
from assessment_hub.scoring.engine import (
    SCORING_RULES,
    ResponseValidationError,
    label_responses,
    normalize_responses,
    score_responses,
)
from assessment_hub.scoring.registry import (
    TemplateNotFoundError,
    find_template,
    get_template,
    is_registered,
    list_templates,
)

__all__ = [
    "UNKNOWN_LABEL",
    "AssessmentStatus",
    "AssessmentTemplate",
    "LabeledResponse",
    "Option",
    "Question",
    "ScoringResult",
    "ScoringRule",
    "SCORING_RULES",
    "ResponseValidationError",
    "label_responses",
    "normalize_responses",
    "score_responses",
    "TemplateNotFoundError",
    "find_template",
    "get_template",
    "is_registered",
    "list_templates",
]
