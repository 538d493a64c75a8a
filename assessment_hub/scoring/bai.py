"""BAI (Beck Anxiety Inventory) template and scoring rule.

21 symptoms rated for the past month, 0-3 each. Total 0-63.

Severity bands:
- 0-7: Minimal
- 8-15: Mild
- 16-25: Moderate
- 26-63: Severe
"""

from assessment_hub.scoring.base import (
    AssessmentTemplate,
    FlagRule,
    Option,
    Question,
    ScoringRule,
    SeverityThreshold,
    total_at_least,
)

TYPE_ID = "BAI"

BOTHER_OPTIONS = (
    Option(0, "Not at all"),
    Option(1, "Mildly, but it didn't bother me much"),
    Option(2, "Moderately - it wasn't pleasant at times"),
    Option(3, "Severely - it bothered me a lot"),
)

_ITEMS = [
    "Numbness or tingling",
    "Feeling hot",
    "Wobbliness in legs",
    "Unable to relax",
    "Fear of worst happening",
    "Dizzy or lightheaded",
    "Heart pounding / racing",
    "Unsteady",
    "Terrified or afraid",
    "Nervous",
    "Feeling of choking",
    "Hands trembling",
    "Shaky / unsteady",
    "Fear of losing control",
    "Difficulty in breathing",
    "Fear of dying",
    "Scared",
    "Indigestion",
    "Faint / lightheaded",
    "Face flushed",
    "Hot / cold sweats",
]

TEMPLATE = AssessmentTemplate(
    type_id=TYPE_ID,
    display_name="BAI",
    full_name="Beck Anxiety Inventory",
    description="Measures the severity of anxiety symptoms",
    category="Anxiety",
    time_estimate="8 minutes",
    questions=tuple(
        Question(id=i, text=text, options=BOTHER_OPTIONS)
        for i, text in enumerate(_ITEMS, start=1)
    ),
)

RULE = ScoringRule(
    thresholds=(
        SeverityThreshold(7, "Minimal Anxiety"),
        SeverityThreshold(15, "Mild Anxiety"),
        SeverityThreshold(25, "Moderate Anxiety"),
        SeverityThreshold(None, "Severe Anxiety"),
    ),
    flag_rules=(
        FlagRule(
            name="severe_anxiety",
            predicate=total_at_least(26),
            flag="Severe anxiety symptoms",
        ),
    ),
)
