"""Tests for gross aggregation, net scores and field ranking."""
from decimal import Decimal
from types import SimpleNamespace

from services.ranking import FieldEntry, net_score, rank_field
from services.score_aggregator import find_score_anomalies, gross_score, group_scores_by_player


def _score(player_id, hole_number, strokes):
    return SimpleNamespace(player_id=player_id, hole_number=hole_number, strokes=strokes)


class TestGrossScore:
    def test_sums_only_the_players_entries(self):
        scores = [_score(1, 1, 4), _score(1, 2, 5), _score(2, 1, 7)]
        assert gross_score(1, scores) == 9
        assert gross_score(2, scores) == 7

    def test_missing_holes_count_as_zero(self):
        scores = [_score(1, hole, 4) for hole in range(1, 19) if hole not in (7, 13)]
        assert gross_score(1, scores) == 64

    def test_player_without_entries(self):
        assert gross_score(3, [_score(1, 1, 4)]) == 0

    def test_groups_by_player(self):
        grouped = group_scores_by_player([_score(1, 1, 4), _score(2, 1, 5), _score(1, 2, 3)])
        assert sorted(grouped) == [1, 2]
        assert len(grouped[1]) == 2


class TestScoreAnomalies:
    def test_clean_card(self):
        scores = [_score(1, hole, 4) for hole in range(1, 19)]
        assert find_score_anomalies(1, scores, range(1, 19)) == []

    def test_unknown_hole_and_negative_strokes(self):
        problems = find_score_anomalies(1, [_score(1, 19, 4), _score(1, 3, -1)], range(1, 19))
        assert len(problems) == 2
        assert 'hole 19 is not on the course' in problems[0]
        assert 'negative strokes' in problems[1]

    def test_zero_strokes_is_not_an_anomaly(self):
        assert find_score_anomalies(1, [_score(1, 5, 0)], range(1, 19)) == []


class TestNetScore:
    def test_keeps_fractional_handicap(self):
        assert net_score(80, Decimal('12.37')) == Decimal('67.63')

    def test_float_handicap_is_exact(self):
        assert net_score(80, 12.1) == Decimal('67.9')


class TestRankField:
    def test_lower_net_ranks_first(self):
        ranked = rank_field([
            FieldEntry(player_id=1, gross_score=90, handicap_before=10),
            FieldEntry(player_id=2, gross_score=75, handicap_before=2),
            FieldEntry(player_id=3, gross_score=82, handicap_before=12),
        ])
        assert [e.player_id for e in ranked] == [3, 2, 1]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_equal_net_goes_to_lower_handicap(self):
        ranked = rank_field([
            FieldEntry(player_id=1, gross_score=80, handicap_before=10),
            FieldEntry(player_id=2, gross_score=78, handicap_before=8),
        ])
        assert ranked[0].player_id == 2
        assert ranked[0].net_score == ranked[1].net_score == Decimal('70')

    def test_full_tie_falls_back_to_player_id(self):
        entries = [
            FieldEntry(player_id=9, gross_score=80, handicap_before=10),
            FieldEntry(player_id=4, gross_score=80, handicap_before=10),
        ]
        assert [e.player_id for e in rank_field(entries)] == [4, 9]
        assert [e.player_id for e in rank_field(list(reversed(entries)))] == [4, 9]

    def test_ranks_are_sequential_without_gaps_across_ties(self):
        ranked = rank_field([
            FieldEntry(player_id=i, gross_score=80, handicap_before=10) for i in range(1, 6)
        ])
        assert [e.rank for e in ranked] == [1, 2, 3, 4, 5]

    def test_fractional_net_is_not_rounded_before_ranking(self):
        ranked = rank_field([
            FieldEntry(player_id=1, gross_score=80, handicap_before=Decimal('10.4')),
            FieldEntry(player_id=2, gross_score=80, handicap_before=Decimal('10.45')),
        ])
        assert ranked[0].player_id == 2

    def test_empty_field(self):
        assert rank_field([]) == []
