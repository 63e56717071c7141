"""Tests for the season points table."""
import pytest

from services.point_calculator import get_points_table, points_for


class TestPointsFor:
    def test_major_winner(self):
        assert points_for('major', 1) == 21

    def test_final_fifth(self):
        assert points_for('final', 5) == 3

    def test_regular_sixth_scores_nothing(self):
        assert points_for('regular', 6) == 0

    def test_unknown_tier_uses_regular_table(self):
        assert points_for('unknown-tier', 1) == 16
        assert points_for(None, 2) == 8

    @pytest.mark.parametrize('tier, expected', [
        ('regular', [16, 8, 4, 2, 1]),
        ('major', [21, 12, 7, 4, 2]),
        ('final', [26, 16, 10, 6, 3]),
    ])
    def test_full_table(self, tier, expected):
        assert [points_for(tier, rank) for rank in range(1, 6)] == expected

    def test_deep_ranks_never_negative(self):
        assert all(points_for('final', rank) == 0 for rank in range(6, 40))


def test_points_table_fallback_is_regular():
    assert get_points_table('club-championship') == get_points_table('regular')
