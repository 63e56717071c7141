"""
SQLAlchemy models for the Golf Tour Manager.
"""
from .player import Player, PlayerSeasonStats
from .course import Course, CourseHole
from .event import Event, EventParticipant, EventResult
from .score import Score
from .handicap_history import HandicapHistory
from .audit_log import AuditLog

__all__ = [
    'Player',
    'PlayerSeasonStats',
    'Course',
    'CourseHole',
    'Event',
    'EventParticipant',
    'EventResult',
    'Score',
    'HandicapHistory',
    'AuditLog',
]
