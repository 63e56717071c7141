"""Tests for handicap revision of the top three finishers."""
from decimal import Decimal

import pytest

from services.handicap import floor_to_tenth, revise_handicap, under_par_adjustment


class TestFloorToTenth:
    def test_truncates_instead_of_rounding(self):
        assert floor_to_tenth(Decimal('5.859')) == Decimal('5.8')

    def test_negative_values_floor_downward(self):
        assert floor_to_tenth(Decimal('-4.91')) == Decimal('-5.0')
        assert floor_to_tenth(Decimal('-4.9')) == Decimal('-4.9')

    def test_accepts_floats_without_binary_noise(self):
        assert floor_to_tenth(0.3) == Decimal('0.3')


class TestUnderParAdjustment:
    def test_net_below_par(self):
        assert under_par_adjustment(Decimal('12.37'), 68, 72) == (Decimal('4'), Decimal('8.37'))

    def test_net_at_par_is_not_under(self):
        assert under_par_adjustment(Decimal('10'), 72, 72) == (Decimal('0'), Decimal('10'))

    def test_fractional_net(self):
        under, adjusted = under_par_adjustment(Decimal('9.5'), Decimal('70.5'), 72)
        assert under == Decimal('1.5')
        assert adjusted == Decimal('8.0')


class TestReviseHandicap:
    def test_winner_coefficient_is_truncated(self):
        revision = revise_handicap(Decimal('12.37'), 1, 68, 72)
        assert revision.under_par_strokes == Decimal('4')
        assert revision.handicap_after == Decimal('5.8')

    def test_negative_adjusted_handicap_gets_flat_bonus(self):
        # 3.0 - 10 = -7.0; -7.0 * 0.7 = -4.9 would raise it, so -7.0 + 3 applies
        revision = revise_handicap(Decimal('3.0'), 1, 62, 72)
        assert revision.under_par_strokes == Decimal('10')
        assert revision.handicap_after == Decimal('-4.0')

    @pytest.mark.parametrize('rank, bonus', [(1, 3), (2, 2), (3, 1)])
    def test_bonus_depends_on_rank(self, rank, bonus):
        revision = revise_handicap(Decimal('0'), rank, 67, 72)
        assert revision.handicap_after == Decimal('-5') + bonus

    def test_second_and_third_coefficients(self):
        assert revise_handicap(Decimal('10'), 2, 72, 72).handicap_after == Decimal('8.0')
        assert revise_handicap(Decimal('10'), 3, 75, 72).handicap_after == Decimal('9.0')

    def test_zero_handicap_at_par_is_unchanged(self):
        revision = revise_handicap(Decimal('0'), 3, 75, 72)
        assert revision.handicap_after == Decimal('0')
        assert revision.under_par_strokes == Decimal('0')

    @pytest.mark.parametrize('rank', [4, 5, 12])
    def test_no_revision_beyond_third(self, rank):
        revision = revise_handicap(Decimal('14.2'), rank, 55, 72)
        assert revision.handicap_after == Decimal('14.2')
        assert revision.under_par_strokes == Decimal('0')

    def test_float_inputs_behave_like_decimals(self):
        assert revise_handicap(12.37, 1, 68, 72).handicap_after == Decimal('5.8')
