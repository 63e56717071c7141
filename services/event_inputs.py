"""
Loads everything finalization reads for one event in a handful of queries.
"""
from dataclasses import dataclass, field

from models import CourseHole, Event, EventParticipant, PlayerSeasonStats, Score
from services.score_aggregator import group_scores_by_player


@dataclass
class EventInputs:
    event: Event
    holes: list = field(default_factory=list)
    participant_ids: list = field(default_factory=list)
    scores_by_player: dict = field(default_factory=dict)
    stats_by_player: dict = field(default_factory=dict)

    @property
    def course_par(self) -> int:
        return sum(hole.par for hole in self.holes)

    @property
    def hole_numbers(self) -> list:
        return [hole.hole_number for hole in self.holes]

    def scores_for(self, player_id: int) -> list:
        return self.scores_by_player.get(player_id, [])


def season_stats_query(year: int, player_ids, for_update: bool = False):
    """Season stats rows for the field.

    With for_update the rows stay locked until the transaction ends, so a
    second event sharing a player reads current_handicap only after this one
    commits. Rows are locked in player id order. SQLite ignores FOR UPDATE and
    relies on BEGIN IMMEDIATE instead.
    """
    query = (
        PlayerSeasonStats.query
        .filter(PlayerSeasonStats.year == year, PlayerSeasonStats.player_id.in_(player_ids))
        .order_by(PlayerSeasonStats.player_id)
    )
    return query.with_for_update() if for_update else query


def load_event_inputs(event: Event, lock_stats: bool = False) -> EventInputs:
    holes = (
        CourseHole.query
        .filter_by(course_id=event.course_id)
        .order_by(CourseHole.hole_number)
        .all()
    )
    participant_ids = [
        row.player_id
        for row in EventParticipant.query.filter_by(event_id=event.id).order_by(EventParticipant.player_id).all()
    ]
    scores = (
        Score.query
        .filter(Score.event_id == event.id, Score.player_id.in_(participant_ids))
        .order_by(Score.player_id, Score.hole_number)
        .all()
    ) if participant_ids else []
    stats_rows = season_stats_query(event.year, participant_ids, for_update=lock_stats).all() if participant_ids else []

    return EventInputs(
        event=event,
        holes=holes,
        participant_ids=participant_ids,
        scores_by_player=group_scores_by_player(scores),
        stats_by_player={row.player_id: row for row in stats_rows},
    )
