"""
Validation service for event finalization.

Provides checks for:
- Course layout (hole count, hole numbering, pars)
- Participant readiness (season stats row, usable score entries)
- Event readiness as a whole, for a pre-finalization report
"""
from typing import List
import config
from services.event_inputs import EventInputs
from services.score_aggregator import find_score_anomalies


class ValidationIssue:
    """Represents a single validation problem."""

    def __init__(self, code: str, message: str, field: str = None, entity_id: int = None):
        self.code = code
        self.message = message
        self.field = field
        self.entity_id = entity_id

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'message': self.message,
            'field': self.field,
            'entity_id': self.entity_id
        }


class ValidationResult:
    """Collection of validation results."""

    def __init__(self):
        self.errors: List[ValidationIssue] = []
        self.warnings: List[ValidationIssue] = []

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def add_error(self, code: str, message: str, field: str = None, entity_id: int = None):
        self.errors.append(ValidationIssue(code, message, field, entity_id))

    def add_warning(self, code: str, message: str, field: str = None, entity_id: int = None):
        self.warnings.append(ValidationIssue(code, message, field, entity_id))

    def merge(self, other: 'ValidationResult', errors_as_warnings: bool = False):
        """Merge another ValidationResult into this one."""
        if errors_as_warnings:
            self.warnings.extend(other.errors)
        else:
            self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def to_dict(self) -> dict:
        return {
            'is_valid': self.is_valid,
            'has_warnings': self.has_warnings,
            'error_count': len(self.errors),
            'warning_count': len(self.warnings),
            'errors': [e.to_dict() for e in self.errors],
            'warnings': [w.to_dict() for w in self.warnings]
        }


class CourseValidator:
    """Validates the hole layout an event is played on."""

    @classmethod
    def validate(cls, course_id: int, holes: list) -> ValidationResult:
        result = ValidationResult()

        if not holes:
            result.add_error('no_holes', f'Course {course_id} has no holes configured.',
                             field='holes', entity_id=course_id)
            return result

        numbers = [h.hole_number for h in holes]
        expected = set(range(1, config.HOLES_PER_ROUND + 1))
        if len(numbers) != len(set(numbers)):
            result.add_error('duplicate_holes', f'Course {course_id} has duplicate hole numbers.',
                             field='hole_number', entity_id=course_id)
        if set(numbers) != expected:
            missing = sorted(expected - set(numbers))
            extra = sorted(set(numbers) - expected)
            result.add_error(
                'hole_numbering',
                f'Course {course_id} must have holes 1-{config.HOLES_PER_ROUND} '
                f'(missing {missing}, unexpected {extra}).',
                field='hole_number',
                entity_id=course_id
            )

        for hole in holes:
            if hole.par not in config.VALID_PARS:
                result.add_error('invalid_par', f'Hole {hole.hole_number} has invalid par {hole.par}.',
                                 field='par', entity_id=course_id)

        return result


class ParticipantValidator:
    """Validates that one participant can be ranked."""

    @classmethod
    def validate(cls, inputs: EventInputs, player_id: int) -> ValidationResult:
        result = ValidationResult()

        if player_id not in inputs.stats_by_player:
            result.add_error(
                'missing_season_stats',
                f'Player {player_id} has no season stats for {inputs.event.year}.',
                field='player_season_stats',
                entity_id=player_id
            )

        for problem in find_score_anomalies(player_id, inputs.scores_for(player_id), inputs.hole_numbers):
            result.add_error('malformed_scores', f'Player {player_id}: {problem}.',
                             field='scores', entity_id=player_id)

        return result


class EventValidator:
    """Validates an event ahead of finalization."""

    @classmethod
    def validate_full(cls, inputs: EventInputs) -> ValidationResult:
        """
        Report everything finalization would reject or skip.

        Course and roster problems are errors (finalization aborts); participant
        problems are warnings because those players are excluded, not fatal.
        """
        event = inputs.event
        result = ValidationResult()

        if event.is_finalized:
            result.add_error('already_finalized', f'Event {event.id} is already finalized.',
                             entity_id=event.id)

        if event.event_type not in config.POINTS_TABLE:
            result.add_warning(
                'unknown_event_type',
                f'Event type {event.event_type!r} is not a known tier; {config.DEFAULT_EVENT_TIER} points apply.',
                field='event_type',
                entity_id=event.id
            )

        result.merge(CourseValidator.validate(event.course_id, inputs.holes))

        if not inputs.participant_ids:
            result.add_error('no_participants', f'Event {event.id} has no participants.',
                             entity_id=event.id)

        for player_id in inputs.participant_ids:
            result.merge(ParticipantValidator.validate(inputs, player_id), errors_as_warnings=True)

        return result
