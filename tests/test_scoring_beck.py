"""Unit tests for BDI-II and BAI scoring."""

import pytest

from assessment_hub.scoring import AssessmentStatus
from assessment_hub.scoring import bai, bdi2
from assessment_hub.scoring.engine import score_responses
from tests.conftest import answers, answers_totalling


class TestBDI2Scoring:
    """Tests for Beck Depression Inventory-II."""

    def test_template_shape(self) -> None:
        assert len(bdi2.TEMPLATE.questions) == 21
        assert bdi2.TEMPLATE.max_score == 63
        assert bdi2.TEMPLATE.get_question(9).text.startswith("Suicidal Thoughts")

    @pytest.mark.parametrize(
        "total,expected",
        [
            (0, "Minimal Depression"),
            (13, "Minimal Depression"),
            (14, "Mild Depression"),
            (19, "Mild Depression"),
            (20, "Moderate Depression"),
            (28, "Moderate Depression"),
            (29, "Severe Depression"),
            (60, "Severe Depression"),
        ],
    )
    def test_band_boundaries(self, total: int, expected: str) -> None:
        responses = answers_totalling(21, 0)
        # Spread the total over items other than 9
        remaining = total
        for i in [n for n in range(1, 22) if n != 9]:
            value = min(3, remaining)
            responses[i] = value
            remaining -= value

        result = score_responses("BDI-II", responses)

        assert result.total_score == total
        assert result.severity == expected

    def test_severe_total_flags_without_flag_string(self) -> None:
        """Total 29 is flagged even though no flag string is added."""
        responses = answers(21, 0)
        remaining = 29
        for i in [n for n in range(1, 22) if n != 9]:
            value = min(3, remaining)
            responses[i] = value
            remaining -= value

        result = score_responses("BDI-II", responses)

        assert result.total_score == 29
        assert result.status == AssessmentStatus.FLAGGED
        assert result.risk_flags == []

    def test_moderate_total_not_flagged(self) -> None:
        responses = answers(21, 0)
        responses.update({1: 3, 2: 3, 3: 3, 4: 3, 5: 3, 6: 3, 7: 3, 8: 3, 10: 3, 11: 1})

        result = score_responses("BDI-II", responses)

        assert result.total_score == 28
        assert result.status == AssessmentStatus.COMPLETED

    def test_suicidal_thoughts_item(self) -> None:
        result = score_responses("BDI-II", answers(21, 0, q9=1))

        assert result.risk_flags == ["Suicidal ideation"]
        assert result.status == AssessmentStatus.FLAGGED


class TestBAIScoring:
    """Tests for Beck Anxiety Inventory."""

    def test_template_shape(self) -> None:
        assert len(bai.TEMPLATE.questions) == 21
        assert bai.TEMPLATE.max_score == 63

    @pytest.mark.parametrize(
        "total,expected,flagged",
        [
            (0, "Minimal Anxiety", False),
            (7, "Minimal Anxiety", False),
            (8, "Mild Anxiety", False),
            (15, "Mild Anxiety", False),
            (16, "Moderate Anxiety", False),
            (25, "Moderate Anxiety", False),
            (26, "Severe Anxiety", True),
            (63, "Severe Anxiety", True),
        ],
    )
    def test_band_boundaries(self, total: int, expected: str, flagged: bool) -> None:
        result = score_responses("BAI", answers_totalling(21, total))

        assert result.total_score == total
        assert result.severity == expected
        assert result.is_flagged is flagged
        assert result.risk_flags == (["Severe anxiety symptoms"] if flagged else [])

    def test_item9_is_ignored(self) -> None:
        """Item 9 (Terrified or afraid) carries no special rule."""
        result = score_responses("BAI", answers(21, 0, q9=3))

        assert result.status == AssessmentStatus.COMPLETED
