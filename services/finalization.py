"""
Event finalization service.

Turns the raw hole-by-hole scores of an event into its official results:
1. Aggregate gross scores and compute net scores
2. Rank the field and award season points
3. Revise handicaps for the top finishers
4. Write results, season totals, handicap history and the audit entry
5. Mark the event finalized

Everything runs in one database transaction. The transaction opens by
claiming the event with a conditional UPDATE on is_finalized, so a concurrent
finalize either waits and then sees the claim, or loses the race and is
rejected. Any failure rolls back every write (the claim included) and the
event stays open for a clean retry.
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

import config
from database import db
from models import Course, Event, EventResult, HandicapHistory, PlayerSeasonStats
from services.audit import log_action
from services.errors import (AlreadyFinalized, BadRequest, DataIntegrityError,
                             FinalizationError, NotFound, StorageError)
from services.event_inputs import EventInputs, load_event_inputs
from services.handicap import revise_handicap
from services.point_calculator import points_for
from services.ranking import FieldEntry, rank_field
from services.score_aggregator import gross_score
from services.validation import CourseValidator, ParticipantValidator

logger = logging.getLogger(__name__)

_event_locks = {}  # event_id -> [lock, holders]
_registry_lock = threading.Lock()


@contextmanager
def _event_lock(event_id: int):
    """Serialize finalize calls for the same event within this process.

    An entry lives only while some caller holds or waits on it.
    """
    with _registry_lock:
        entry = _event_locks.setdefault(event_id, [threading.Lock(), 0])
        entry[1] += 1
    try:
        with entry[0]:
            yield
    finally:
        with _registry_lock:
            entry[1] -= 1
            if entry[1] == 0:
                del _event_locks[event_id]


@dataclass
class ExcludedParticipant:
    """A participant left out of the ranking, and why."""

    player_id: int
    reasons: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {'player_id': self.player_id, 'reasons': list(self.reasons)}


@dataclass
class FinalizationOutcome:
    event: Event
    results: list = field(default_factory=list)  # EventResult rows in rank order
    excluded: list = field(default_factory=list)  # ExcludedParticipant

    def to_dict(self) -> dict:
        return {
            'success': True,
            'event_id': self.event.id,
            'event_type': self.event.event_type,
            'finalized_at': self.event.finalized_at.isoformat() if self.event.finalized_at else None,
            'results': [r.to_dict() for r in self.results],
            'excluded': [e.to_dict() for e in self.excluded],
        }


def finalize_event(event_id: int) -> FinalizationOutcome:
    """
    Finalize an event exactly once.

    Args:
        event_id: Event to finalize

    Returns:
        FinalizationOutcome with ranked results and excluded participants

    Raises:
        NotFound: the event or its course does not exist
        AlreadyFinalized: the event was finalized before (or concurrently)
        BadRequest: the event has no participants
        DataIntegrityError: course layout is unusable or nobody can be ranked
        StorageError: the database failed; nothing was written
    """
    with _event_lock(event_id):
        try:
            outcome = _finalize(event_id)
            db.session.commit()
        except FinalizationError:
            db.session.rollback()
            raise
        except IntegrityError as exc:
            db.session.rollback()
            if 'event_results' in str(exc.orig) or 'uq_event_result_player' in str(exc.orig):
                raise AlreadyFinalized(f'Results for event {event_id} were already recorded.') from exc
            logger.exception('Integrity failure while finalizing event %s', event_id, extra={'event_id': event_id})
            raise StorageError(f'Could not store results for event {event_id}.') from exc
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.exception('Storage failure while finalizing event %s', event_id, extra={'event_id': event_id})
            raise StorageError(f'Could not store results for event {event_id}.') from exc

    logger.info(
        'Event %s finalized: %d ranked, %d excluded',
        event_id, len(outcome.results), len(outcome.excluded),
        extra={'event_id': event_id, 'ranked': len(outcome.results), 'excluded': len(outcome.excluded)},
    )
    return outcome


def _finalize(event_id: int) -> FinalizationOutcome:
    event = db.session.get(Event, event_id)
    if event is None:
        raise NotFound(f'Event {event_id} not found.')
    if event.is_finalized:
        raise AlreadyFinalized(f'Event {event_id} is already finalized.')
    if db.session.get(Course, event.course_id) is None:
        raise NotFound(f'Course {event.course_id} for event {event_id} not found.')

    _claim_event(event, finalized_at=datetime.utcnow())

    inputs = load_event_inputs(event, lock_stats=True)
    course_check = CourseValidator.validate(event.course_id, inputs.holes)
    if not course_check.is_valid:
        raise DataIntegrityError(
            f'Course {event.course_id} cannot be used to finalize event {event_id}.',
            details={'problems': course_check.messages()},
        )
    if not inputs.participant_ids:
        raise BadRequest(f'Event {event_id} has no participants.')

    entries, excluded = _build_field(inputs)
    if not entries:
        raise DataIntegrityError(
            f'No participant of event {event_id} can be ranked.',
            details={'excluded': [e.to_dict() for e in excluded]},
        )

    course_par = inputs.course_par
    results = [_record_result(event, entry, course_par) for entry in rank_field(entries)]

    log_action(
        action='event_finalized',
        entity_type='event',
        entity_id=event.id,
        details={
            'year': event.year,
            'event_type': event.event_type,
            'course_par': course_par,
            'ranked': len(results),
            'excluded': [e.to_dict() for e in excluded],
        }
    )
    return FinalizationOutcome(event=event, results=results, excluded=excluded)


def _claim_event(event: Event, finalized_at: datetime) -> None:
    """Flip the event to finalized unless someone else already has."""
    claimed = db.session.execute(
        update(Event)
        .where(Event.id == event.id, Event.is_finalized.is_(False))
        .values(is_finalized=True, finalized_at=finalized_at, status='completed')
        .execution_options(synchronize_session=False)
    ).rowcount
    if claimed != 1:
        raise AlreadyFinalized(f'Event {event.id} is already finalized.')


def _build_field(inputs: EventInputs) -> tuple:
    """Return (FieldEntry list, ExcludedParticipant list)."""
    entries = []
    excluded = []
    for player_id in inputs.participant_ids:
        check = ParticipantValidator.validate(inputs, player_id)
        if not check.is_valid:
            reasons = check.messages()
            for reason in reasons:
                logger.warning('Excluding player %s from event %s: %s', player_id, inputs.event.id, reason,
                               extra={'event_id': inputs.event.id, 'player_id': player_id})
            excluded.append(ExcludedParticipant(player_id=player_id, reasons=reasons))
            continue

        stats = inputs.stats_by_player[player_id]
        entries.append(FieldEntry(
            player_id=player_id,
            gross_score=gross_score(player_id, inputs.scores_for(player_id)),
            handicap_before=stats.current_handicap,
        ))
    return entries, excluded


def _record_result(event: Event, entry: FieldEntry, course_par: int) -> EventResult:
    points = points_for(event.event_type, entry.rank)
    revision = revise_handicap(entry.handicap_before, entry.rank, entry.net_score, course_par)

    result = EventResult(
        event_id=event.id,
        player_id=entry.player_id,
        gross_score=entry.gross_score,
        net_score=entry.net_score,
        rank=entry.rank,
        points=points,
        handicap_before=entry.handicap_before,
        handicap_after=revision.handicap_after,
        under_par_strokes=revision.under_par_strokes,
    )
    db.session.add(result)

    _apply_season_delta(entry.player_id, event.year, points, revision.handicap_after)

    if revision.handicap_after != entry.handicap_before:
        db.session.add(HandicapHistory(
            player_id=entry.player_id,
            event_id=event.id,
            year=event.year,
            handicap_before=entry.handicap_before,
            handicap_after=revision.handicap_after,
            reason=config.HANDICAP_HISTORY_REASON,
        ))
    return result


def _apply_season_delta(player_id: int, year: int, points: int, handicap_after) -> None:
    """Increment season totals in SQL so concurrent events never lose an update."""
    updated = db.session.execute(
        update(PlayerSeasonStats)
        .where(PlayerSeasonStats.player_id == player_id, PlayerSeasonStats.year == year)
        .values(
            current_handicap=handicap_after,
            total_points=PlayerSeasonStats.total_points + points,
            participation_count=PlayerSeasonStats.participation_count + 1,
        )
        .execution_options(synchronize_session=False)
    ).rowcount
    if updated != 1:
        raise DataIntegrityError(f'Season stats for player {player_id} in {year} disappeared during finalization.')
