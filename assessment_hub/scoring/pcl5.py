"""PCL-5 (PTSD Checklist for DSM-5) template and scoring rule.

20 items rated 0-4 for the past month. Total 0-80.

A total of 33 or more indicates probable PTSD. Unlike the other
instruments the severity labels are fixed literals rather than
"<Level> <Condition>".
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

TYPE_ID = "PCL-5"

PROBABLE_PTSD_CUTOFF = 33

DISTRESS_OPTIONS = (
    Option(0, "Not at all"),
    Option(1, "A little bit"),
    Option(2, "Moderately"),
    Option(3, "Quite a bit"),
    Option(4, "Extremely"),
)

_ITEMS = [
    "Repeated, disturbing, and unwanted memories of the stressful experience",
    "Repeated, disturbing dreams of the stressful experience",
    "Suddenly feeling or acting as if the stressful experience were actually "
    "happening again (as if you were actually back there reliving it)",
    "Feeling very upset when something reminded you of the stressful experience",
    "Having strong physical reactions when something reminded you of the "
    "stressful experience (for example, heart pounding, trouble breathing, "
    "sweating)",
    "Avoiding memories, thoughts, or feelings related to the stressful experience",
    "Avoiding external reminders of the stressful experience (for example, "
    "people, places, conversations, activities, objects, or situations)",
    "Trouble remembering important parts of the stressful experience",
    "Having strong negative beliefs about yourself, other people, or the world",
    "Blaming yourself or someone else for the stressful experience or what "
    "happened after it",
    "Having strong negative feelings such as fear, horror, anger, guilt, or shame",
    "Loss of interest in activities that you used to enjoy",
    "Feeling distant or cut off from other people",
    "Trouble experiencing positive feelings (for example, being unable to feel "
    "happiness or have loving feelings for people close to you)",
    "Irritable behavior, angry outbursts, or acting aggressively",
    "Taking too many risks or doing things that could cause you harm",
    "Being \"superalert\" or watchful or on guard",
    "Feeling jumpy or easily startled",
    "Having difficulty concentrating",
    "Trouble falling or staying asleep",
]

TEMPLATE = AssessmentTemplate(
    type_id=TYPE_ID,
    display_name="PCL-5",
    full_name="PTSD Checklist for DSM-5",
    description="Assessment for Post-Traumatic Stress Disorder symptoms",
    category="Trauma",
    time_estimate="7 minutes",
    questions=tuple(
        Question(id=i, text=text, options=DISTRESS_OPTIONS)
        for i, text in enumerate(_ITEMS, start=1)
    ),
)

RULE = ScoringRule(
    thresholds=(
        SeverityThreshold(PROBABLE_PTSD_CUTOFF - 1, "Below PTSD Threshold"),
        SeverityThreshold(None, "Probable PTSD"),
    ),
    flag_rules=(
        FlagRule(
            name="probable_ptsd",
            predicate=total_at_least(PROBABLE_PTSD_CUTOFF),
            flag="Probable PTSD",
        ),
    ),
)
