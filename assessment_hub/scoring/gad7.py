"""GAD-7 (Generalized Anxiety Disorder-7) template and scoring rule.

The GAD-7 is a validated 7-item anxiety screening instrument.
Each item is scored 0-3 on the same frequency scale as the PHQ-9.

Total score ranges 0-21.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-21: Severe
"""

from assessment_hub.scoring.base import (
    AssessmentTemplate,
    FlagRule,
    Question,
    ScoringRule,
    SeverityThreshold,
    total_at_least,
)
from assessment_hub.scoring.phq9 import FREQUENCY_OPTIONS

TYPE_ID = "GAD-7"

_ITEMS = [
    "Feeling nervous, anxious, or on edge",
    "Not being able to stop or control worrying",
    "Worrying too much about different things",
    "Trouble relaxing",
    "Being so restless that it is hard to sit still",
    "Becoming easily annoyed or irritable",
    "Feeling afraid, as if something awful might happen",
]

TEMPLATE = AssessmentTemplate(
    type_id=TYPE_ID,
    display_name="GAD-7",
    full_name="Generalized Anxiety Disorder 7-item",
    description="Anxiety screening and severity assessment",
    category="Anxiety",
    time_estimate="3 minutes",
    questions=tuple(
        Question(id=i, text=text, options=FREQUENCY_OPTIONS)
        for i, text in enumerate(_ITEMS, start=1)
    ),
)

RULE = ScoringRule(
    thresholds=(
        SeverityThreshold(4, "Minimal Anxiety"),
        SeverityThreshold(9, "Mild Anxiety"),
        SeverityThreshold(14, "Moderate Anxiety"),
        SeverityThreshold(None, "Severe Anxiety"),
    ),
    flag_rules=(
        FlagRule(
            name="severe_anxiety",
            predicate=total_at_least(15),
            flag="Severe anxiety symptoms",
        ),
    ),
)
