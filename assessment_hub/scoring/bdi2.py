"""BDI-II (Beck Depression Inventory-II) template and scoring rule.

21 items, each with four graded statements scored 0-3. Total 0-63.

Severity bands:
- 0-13: Minimal
- 14-19: Mild
- 20-28: Moderate
- 29-63: Severe

Item 9 covers suicidal thoughts; any answer above 0 flags the assessment.
Severe totals (29+) are flagged without an extra flag string.
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

TYPE_ID = "BDI-II"

SUICIDAL_THOUGHTS_ITEM = 9

# (question text, option labels for values 0-3)
_ITEMS: list[tuple[str, tuple[str, str, str, str]]] = [
    ("Sadness: I do not feel sad.", (
        "I do not feel sad",
        "I feel sad much of the time",
        "I am sad all the time",
        "I am so sad or unhappy that I can't stand it",
    )),
    ("Pessimism: I am not discouraged about my future.", (
        "I am not discouraged about my future",
        "I feel more discouraged about my future than I used to be",
        "I do not expect things to work out for me",
        "I feel my future is hopeless and will only get worse",
    )),
    ("Past Failure: I do not feel like a failure.", (
        "I do not feel like a failure",
        "I have failed more than I should have",
        "As I look back, I see a lot of failures",
        "I feel I am a total failure as a person",
    )),
    ("Loss of Pleasure: I get as much pleasure as I ever did from the things I enjoy.", (
        "I get as much pleasure as I ever did from the things I enjoy",
        "I don't enjoy things as much as I used to",
        "I get very little pleasure from the things I used to enjoy",
        "I can't get any pleasure from the things I used to enjoy",
    )),
    ("Guilty Feelings: I don't feel particularly guilty.", (
        "I don't feel particularly guilty",
        "I feel guilty over many things I have done or should have done",
        "I feel quite guilty most of the time",
        "I feel guilty all of the time",
    )),
    ("Punishment Feelings: I don't feel I am being punished.", (
        "I don't feel I am being punished",
        "I have a sense that something bad may happen to me",
        "I feel I may be punished",
        "I expect to be punished",
    )),
    ("Self-Dislike: I feel the same about myself as ever.", (
        "I feel the same about myself as ever",
        "I have lost confidence in myself",
        "I am disappointed in myself",
        "I dislike myself",
    )),
    ("Self-Criticalness: I don't criticize or blame myself more than usual.", (
        "I don't criticize or blame myself more than usual",
        "I am more critical of myself than I used to be",
        "I criticize myself for all of my faults",
        "I blame myself for everything bad that happens",
    )),
    ("Suicidal Thoughts: I don't have any thoughts of killing myself.", (
        "I don't have any thoughts of killing myself",
        "I have thoughts of killing myself, but I would not carry them out",
        "I would like to kill myself",
        "I would kill myself if I had the chance",
    )),
    ("Crying: I don't cry any more than I used to.", (
        "I don't cry any more than I used to",
        "I cry more than I used to",
        "I cry over every little thing",
        "I feel like crying, but I can't",
    )),
    ("Agitation: I am no more restless or wound up than usual.", (
        "I am no more restless or wound up than usual",
        "I feel more restless or wound up than usual",
        "I am so restless or agitated that it's hard to stay still",
        "I am so restless or agitated that I have to keep moving or doing something",
    )),
    ("Loss of Interest: I have not lost interest in other people or activities.", (
        "I have not lost interest in other people or activities",
        "I am less interested in other people or things than before",
        "I have lost most of my interest in other people or things",
        "It's hard to get interested in anything",
    )),
    ("Indecisiveness: I make decisions about as well as ever.", (
        "I make decisions about as well as ever",
        "I find it more difficult to make decisions than usual",
        "I have much greater difficulty in making decisions than I used to",
        "I have trouble making any decisions",
    )),
    ("Worthlessness: I do not feel I am worthless.", (
        "I do not feel I am worthless",
        "I don't consider myself as worthwhile and useful as I used to",
        "I feel more worthless as compared to other people",
        "I feel utterly worthless",
    )),
    ("Loss of Energy: I have as much energy as ever.", (
        "I have as much energy as ever",
        "I have less energy than I used to have",
        "I don't have enough energy to do very much",
        "I don't have enough energy to do anything",
    )),
    ("Changes in Sleeping Pattern: I sleep as well as usual.", (
        "I sleep as well as usual",
        "I sleep somewhat less well than usual",
        "I sleep a lot less than usual",
        "I sleep most of the night",
    )),
    ("Irritability: I am no more irritable than usual.", (
        "I am no more irritable than usual",
        "I am more irritable than usual",
        "I am much more irritable than usual",
        "I am irritable all the time",
    )),
    ("Changes in Appetite: My appetite is no different than usual.", (
        "My appetite is no different than usual",
        "My appetite is somewhat less than usual",
        "My appetite is much less than usual",
        "I have no appetite at all",
    )),
    ("Concentration Difficulty: I can concentrate as well as ever.", (
        "I can concentrate as well as ever",
        "I have a little trouble concentrating",
        "It's hard to concentrate on anything for very long",
        "I find I can't concentrate on anything",
    )),
    ("Tiredness or Fatigue: I am not more tired or fatigued than usual.", (
        "I am not more tired or fatigued than usual",
        "I get more tired or fatigued more easily than usual",
        "I am too tired or fatigued to do a lot of the things I used to do",
        "I am too tired or fatigued to do most of the things I used to do",
    )),
    ("Loss of Interest in Sex: I have not noticed any recent change in my interest in sex.", (
        "I have not noticed any recent change in my interest in sex",
        "I am less interested in sex than I used to be",
        "I am much less interested in sex now",
        "I have lost interest in sex completely",
    )),
]

TEMPLATE = AssessmentTemplate(
    type_id=TYPE_ID,
    display_name="BDI-II",
    full_name="Beck Depression Inventory-II",
    description=(
        "Comprehensive depression assessment measuring cognitive, affective, "
        "and somatic symptoms"
    ),
    category="Depression",
    time_estimate="10 minutes",
    questions=tuple(
        Question(
            id=i,
            text=text,
            options=tuple(Option(value, label) for value, label in enumerate(labels)),
        )
        for i, (text, labels) in enumerate(_ITEMS, start=1)
    ),
)

RULE = ScoringRule(
    thresholds=(
        SeverityThreshold(13, "Minimal Depression"),
        SeverityThreshold(19, "Mild Depression"),
        SeverityThreshold(28, "Moderate Depression"),
        SeverityThreshold(None, "Severe Depression"),
    ),
    flag_rules=(
        FlagRule(
            name="suicidal_thoughts",
            predicate=item_at_least(SUICIDAL_THOUGHTS_ITEM, 1),
            flag="Suicidal ideation",
        ),
        FlagRule(
            name="severe_depression",
            predicate=total_at_least(29),
        ),
    ),
)
