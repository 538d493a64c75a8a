"""Data structures shared by the questionnaire templates and scoring rules.

Templates and rules are plain frozen dataclasses built at import time. Adding
an instrument means adding a module that defines a ``TEMPLATE`` and a
``RULE``; no branching code changes.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

UNKNOWN_LABEL = "Unknown"


class AssessmentStatus(str, Enum):
    """Assessment lifecycle status.

    PENDING moves to COMPLETED or FLAGGED exactly once; both are terminal.
    Scoring only ever produces the two terminal values.
    """

    PENDING = "pending"  # Created, awaiting responses
    COMPLETED = "completed"  # Scored, no risk condition met
    FLAGGED = "flagged"  # Scored, at least one risk condition met


@dataclass(frozen=True)
class Option:
    """A selectable answer and the points it contributes."""

    value: int
    label: str


@dataclass(frozen=True)
class Question:
    """A single questionnaire item."""

    id: int
    text: str
    options: tuple[Option, ...]

    def get_option(self, value: int) -> Option | None:
        """Return the option with exactly this value, if any."""
        for option in self.options:
            if option.value == value:
                return option
        return None

    @property
    def max_value(self) -> int:
        return max(option.value for option in self.options)


@dataclass(frozen=True)
class AssessmentTemplate:
    """Immutable definition of a standardized questionnaire."""

    type_id: str
    display_name: str
    full_name: str
    description: str
    category: str
    time_estimate: str
    questions: tuple[Question, ...]

    def get_question(self, question_id: int) -> Question | None:
        """Return the question with this id, if any."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    @property
    def max_score(self) -> int:
        return sum(question.max_value for question in self.questions)


@dataclass(frozen=True)
class SeverityThreshold:
    """Inclusive upper bound for a severity label.

    ``upper_bound=None`` marks the open-ended top bucket.
    """

    upper_bound: int | None
    label: str


# Predicate signature: (total_score, responses) -> bool
FlagPredicate = Callable[[int, Mapping[int, int]], bool]


@dataclass(frozen=True)
class FlagRule:
    """Supplementary risk rule evaluated independently of severity.

    When triggered, ``flag`` (if set) is appended to the risk flags and the
    status is upgraded to flagged when ``forces_flagged`` is set.
    """

    name: str
    predicate: FlagPredicate
    flag: str | None = None
    forces_flagged: bool = True


@dataclass(frozen=True)
class ScoringRule:
    """Severity step function plus risk rules for one assessment type."""

    thresholds: tuple[SeverityThreshold, ...]
    flag_rules: tuple[FlagRule, ...] = ()

    def classify(self, total: int) -> str:
        """Map a total score onto its severity label."""
        for threshold in self.thresholds:
            if threshold.upper_bound is None or total <= threshold.upper_bound:
                return threshold.label
        # Scores above every finite bound fall into the last bucket
        return self.thresholds[-1].label if self.thresholds else ""


def item_at_least(question_id: int, minimum: int) -> FlagPredicate:
    """Trigger when the given item was answered with at least ``minimum``."""

    def predicate(total: int, responses: Mapping[int, int]) -> bool:
        value = responses.get(question_id)
        return value is not None and value >= minimum

    return predicate


def total_at_least(minimum: int) -> FlagPredicate:
    """Trigger when the total score reaches ``minimum``."""

    def predicate(total: int, responses: Mapping[int, int]) -> bool:
        return total >= minimum

    return predicate


@dataclass
class LabeledResponse:
    """A submitted answer with its human-readable option label."""

    question_id: int
    value: int
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "question_id": self.question_id,
            "value": self.value,
            "label": self.label,
        }


@dataclass
class ScoringResult:
    """Outcome of scoring one set of responses."""

    total_score: int
    severity: str
    risk_flags: list[str] = field(default_factory=list)
    status: AssessmentStatus = AssessmentStatus.COMPLETED

    @property
    def is_flagged(self) -> bool:
        return self.status == AssessmentStatus.FLAGGED
