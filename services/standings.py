"""
Season standings and read-only queries for presentation collaborators.
"""
from models import Event, EventResult, HandicapHistory, Player, PlayerSeasonStats
from services.errors import NotFound


def get_annual_standings(year: int, limit: int = None) -> list:
    """
    Get the season points ranking.

    Args:
        year: Season year
        limit: Optional limit on results

    Returns:
        List of (rank, PlayerSeasonStats) tuples; players level on points
        share a rank
    """
    query = (
        PlayerSeasonStats.query
        .filter_by(year=year)
        .order_by(
            PlayerSeasonStats.total_points.desc(),
            PlayerSeasonStats.current_handicap.asc(),
            PlayerSeasonStats.player_id.asc(),
        )
    )
    if limit:
        query = query.limit(limit)
    stats_rows = query.all()

    # Calculate rankings (handle ties)
    standings = []
    current_rank = 1
    previous_points = None

    for i, stats in enumerate(stats_rows):
        if stats.total_points != previous_points:
            current_rank = i + 1
        standings.append((current_rank, stats))
        previous_points = stats.total_points

    return standings


def get_event_results(event_id: int) -> list:
    """Return an event's results in rank order, or raise NotFound."""
    event = Event.query.get(event_id)
    if event is None:
        raise NotFound(f'Event {event_id} not found.')
    return (
        EventResult.query
        .filter_by(event_id=event.id)
        .join(Player, Player.id == EventResult.player_id)
        .order_by(EventResult.rank)
        .all()
    )


def list_events(year: int = None, status: str = None, finalized_only: bool = False) -> list:
    """Return events newest first, optionally filtered."""
    query = Event.query
    if year is not None:
        query = query.filter(Event.year == year)
    if status and status != 'all':
        query = query.filter(Event.status == status)
    if finalized_only:
        query = query.filter(Event.is_finalized.is_(True))
    return query.order_by(Event.event_date.desc(), Event.id.desc()).all()


def get_handicap_history(player_id: int, year: int = None) -> list:
    player = Player.query.get(player_id)
    if player is None:
        raise NotFound(f'Player {player_id} not found.')
    query = HandicapHistory.query.filter_by(player_id=player.id)
    if year is not None:
        query = query.filter_by(year=year)
    return query.order_by(HandicapHistory.created_at, HandicapHistory.id).all()
