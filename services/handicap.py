"""
Handicap revision for the top finishers of an event.

Ranks 1-3 have their handicap cut by the strokes they beat par by, then
scaled by a rank coefficient and truncated to one decimal. When the scaling
would move a negative handicap back toward zero, the scaled value is dropped
and a flat per-rank bonus is added to the cut handicap instead.
"""
from collections import namedtuple
from decimal import Decimal, ROUND_FLOOR

import config
from services.ranking import to_decimal

HandicapRevision = namedtuple('HandicapRevision', ['handicap_after', 'under_par_strokes'])

_TENTH = Decimal('10')


def floor_to_tenth(value) -> Decimal:
    """Truncate downward at one decimal place: floor(x * 10) / 10."""
    scaled = (to_decimal(value) * _TENTH).to_integral_value(rounding=ROUND_FLOOR)
    return scaled / _TENTH


def under_par_adjustment(handicap_before, net_score, course_par) -> tuple:
    """Return (under_par_strokes, adjusted_handicap)."""
    handicap_before = to_decimal(handicap_before)
    net_score = to_decimal(net_score)
    course_par = to_decimal(course_par)
    if net_score < course_par:
        under_par = course_par - net_score
        return under_par, handicap_before - under_par
    return Decimal('0'), handicap_before


def is_revised_rank(rank: int) -> bool:
    return 1 <= rank <= config.HANDICAP_REVISION_MAX_RANK


def revise_handicap(handicap_before, rank: int, net_score, course_par) -> HandicapRevision:
    """
    Compute a player's handicap after an event.

    Args:
        handicap_before: Handicap the player started the event with
        rank: Finishing rank in the event
        net_score: Gross score minus handicap_before
        course_par: Sum of the course's hole pars

    Returns:
        HandicapRevision(handicap_after, under_par_strokes); ranks outside
        the revised places keep their handicap and report 0 under-par strokes
    """
    handicap_before = to_decimal(handicap_before)
    if not is_revised_rank(rank):
        return HandicapRevision(handicap_before, Decimal('0'))

    under_par, adjusted = under_par_adjustment(handicap_before, net_score, course_par)
    revised = floor_to_tenth(adjusted * config.HANDICAP_COEFFICIENTS[rank])

    if revised > adjusted:
        revised = adjusted + config.HANDICAP_BONUS[rank]

    return HandicapRevision(revised, under_par)
