"""PHQ-9 (Patient Health Questionnaire-9) template and scoring rule.

The PHQ-9 is a validated 9-item depression screening instrument.
Each item is scored 0-3:
- 0 = Not at all
- 1 = Several days
- 2 = More than half the days
- 3 = Nearly every day

Total score ranges 0-27.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-19: Moderately Severe
- 20-27: Severe

Item 9 asks about suicidal ideation; any positive answer flags the
assessment regardless of total. A total of 15 or more also flags it.
"""

from assessment_hub.scoring.base import (
    AssessmentTemplate,
    FlagRule,
    Option,
    Question,
    ScoringRule,
    SeverityThreshold,
    item_at_least,
    total_at_least,
)

TYPE_ID = "PHQ-9"

SUICIDAL_IDEATION_ITEM = 9

FREQUENCY_OPTIONS = (
    Option(0, "Not at all"),
    Option(1, "Several days"),
    Option(2, "More than half the days"),
    Option(3, "Nearly every day"),
)

_ITEMS = [
    "Little interest or pleasure in doing things",
    "Feeling down, depressed, or hopeless",
    "Trouble falling or staying asleep, or sleeping too much",
    "Feeling tired or having little energy",
    "Poor appetite or overeating",
    "Feeling bad about yourself - or that you are a failure or have let "
    "yourself or your family down",
    "Trouble concentrating on things, such as reading the newspaper or "
    "watching television",
    "Moving or speaking so slowly that other people could have noticed. Or "
    "the opposite - being so fidgety or restless that you have been moving "
    "around a lot more than usual",
    "Thoughts that you would be better off dead, or of hurting yourself in "
    "some way",
]

TEMPLATE = AssessmentTemplate(
    type_id=TYPE_ID,
    display_name="PHQ-9",
    full_name="Patient Health Questionnaire-9",
    description="Depression screening and severity assessment",
    category="Depression",
    time_estimate="5 minutes",
    questions=tuple(
        Question(id=i, text=text, options=FREQUENCY_OPTIONS)
        for i, text in enumerate(_ITEMS, start=1)
    ),
)

RULE = ScoringRule(
    thresholds=(
        SeverityThreshold(4, "Minimal Depression"),
        SeverityThreshold(9, "Mild Depression"),
        SeverityThreshold(14, "Moderate Depression"),
        SeverityThreshold(19, "Moderately Severe Depression"),
        SeverityThreshold(None, "Severe Depression"),
    ),
    flag_rules=(
        FlagRule(
            name="item9_positive",
            predicate=item_at_least(SUICIDAL_IDEATION_ITEM, 1),
            flag="Suicidal ideation",
        ),
        FlagRule(
            name="moderately_severe_or_worse",
            predicate=total_at_least(15),
        ),
    ),
)
