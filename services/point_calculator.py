"""
Point calculator for season ranking points.

Points depend only on the event tier and the finishing rank; the values live
in config.POINTS_TABLE.
"""
import config


def get_points_table(event_type: str) -> dict:
    """Return the rank -> points map for a tier, falling back to the default tier."""
    return config.POINTS_TABLE.get(event_type, config.POINTS_TABLE[config.DEFAULT_EVENT_TIER])


def points_for(event_type: str, rank: int) -> int:
    """
    Return season points awarded for a finishing rank.

    Args:
        event_type: Event tier ('regular', 'major' or 'final'); unknown tiers
            score as 'regular'
        rank: 1-based finishing rank

    Returns:
        Points awarded (0 beyond the last paid rank)
    """
    return get_points_table(event_type).get(rank, 0)
