"""Unit tests for GAD-7 scoring."""

import pytest

from assessment_hub.scoring import AssessmentStatus
from assessment_hub.scoring.engine import score_responses
from tests.conftest import answers, answers_totalling


class TestGAD7Scoring:
    """Tests for GAD-7 score calculation."""

    def test_all_zeros(self) -> None:
        result = score_responses("GAD-7", answers(7, 0))

        assert result.total_score == 0
        assert result.severity == "Minimal Anxiety"
        assert result.status == AssessmentStatus.COMPLETED

    def test_all_threes(self) -> None:
        """Maximum score is Severe with the severe anxiety flag."""
        result = score_responses("GAD-7", answers(7, 3))

        assert result.total_score == 21
        assert result.severity == "Severe Anxiety"
        assert result.risk_flags == ["Severe anxiety symptoms"]
        assert result.status == AssessmentStatus.FLAGGED

    def test_total_calculation(self) -> None:
        """Total is the sum of all items."""
        responses = {i: i % 4 for i in range(1, 8)}
        result = score_responses("GAD-7", responses)

        # Items: 1, 2, 3, 0, 1, 2, 3 = 12
        assert result.total_score == 12
        assert result.severity == "Moderate Anxiety"

    @pytest.mark.parametrize(
        "total,expected,flagged",
        [
            (4, "Minimal Anxiety", False),
            (5, "Mild Anxiety", False),
            (9, "Mild Anxiety", False),
            (10, "Moderate Anxiety", False),
            (14, "Moderate Anxiety", False),
            (15, "Severe Anxiety", True),
        ],
    )
    def test_band_boundaries(self, total: int, expected: str, flagged: bool) -> None:
        result = score_responses("GAD-7", answers_totalling(7, total))

        assert result.severity == expected
        assert result.is_flagged is flagged
        assert ("Severe anxiety symptoms" in result.risk_flags) is flagged

    def test_item9_is_ignored(self) -> None:
        """GAD-7 has no suicidal ideation rule even for a stray item 9."""
        result = score_responses("GAD-7", {1: 0, 9: 3})

        assert result.risk_flags == []
        assert result.status == AssessmentStatus.COMPLETED
