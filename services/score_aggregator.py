"""
Score aggregation for a finished round.

Works on Score rows (or anything with player_id, hole_number and strokes
attributes) so it can be used on query results and in-memory fixtures alike.
"""
from collections import defaultdict


def group_scores_by_player(scores) -> dict:
    """Return player_id -> list of score entries."""
    grouped = defaultdict(list)
    for score in scores:
        grouped[score.player_id].append(score)
    return dict(grouped)


def gross_score(player_id: int, scores) -> int:
    """
    Sum a player's strokes over the holes they have entries for.

    Holes without an entry count as 0 strokes, as does an entry of 0
    ("not played"); gaps are never an error.
    """
    return sum(int(s.strokes or 0) for s in scores if s.player_id == player_id)


def find_score_anomalies(player_id: int, scores, hole_numbers) -> list:
    """
    Describe entries for a player that cannot be scored.

    Args:
        player_id: Player whose entries are checked
        scores: Score entries for the event
        hole_numbers: Hole numbers that exist on the event's course

    Returns:
        List of human-readable problems (empty when the data is usable)
    """
    valid_holes = set(hole_numbers)
    problems = []
    seen = set()
    for score in scores:
        if score.player_id != player_id:
            continue
        if score.hole_number not in valid_holes:
            problems.append(f'hole {score.hole_number} is not on the course')
        elif score.hole_number in seen:
            problems.append(f'hole {score.hole_number} has more than one entry')
        if score.strokes is not None and score.strokes < 0:
            problems.append(f'hole {score.hole_number} has negative strokes ({score.strokes})')
        seen.add(score.hole_number)
    return problems
