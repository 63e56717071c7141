"""
Net score computation and field ranking.

Lower net score wins. Equal net scores go to the lower handicap, and a tie on
both falls back to player id so the order never depends on input order.
Ranks are positional (1..N) with no shared places.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


def to_decimal(value) -> Decimal:
    """Convert stored or user-supplied numbers without picking up float noise."""
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal('0')
    return Decimal(str(value))


@dataclass
class FieldEntry:
    """One participant's inputs and placement for an event."""

    player_id: int
    gross_score: int
    handicap_before: Decimal
    net_score: Optional[Decimal] = None
    rank: Optional[int] = None

    def __post_init__(self):
        self.handicap_before = to_decimal(self.handicap_before)
        if self.net_score is None:
            self.net_score = net_score(self.gross_score, self.handicap_before)


def net_score(gross: int, handicap) -> Decimal:
    return Decimal(int(gross)) - to_decimal(handicap)


def ranking_key(entry: FieldEntry) -> tuple:
    return (entry.net_score, entry.handicap_before, entry.player_id)


def rank_field(entries) -> list:
    """
    Order the field and assign ranks.

    Args:
        entries: FieldEntry objects for every rankable participant

    Returns:
        New list sorted best-first with rank set on each entry
    """
    ranked = sorted(entries, key=ranking_key)
    for position, entry in enumerate(ranked, start=1):
        entry.rank = position
    return ranked
