"""
Event, participant and EventResult models for tour events.
"""
from sqlalchemy import event as sa_event
from database import db
import config


class Event(db.Model):
    """Represents one round of the season (e.g., the June Major)."""

    __tablename__ = 'events'
    __table_args__ = (
        db.Index('ix_events_year_status', 'year', 'status'),
    )

    id = db.Column(db.Integer, primary_key=True)
    course_id = db.Column(db.Integer, db.ForeignKey('courses.id'), nullable=False)

    # Event identification
    name = db.Column(db.String(200), nullable=False)
    event_date = db.Column(db.Date, nullable=False)
    year = db.Column(db.Integer, nullable=False)  # season the event counts toward
    event_type = db.Column(db.String(20), nullable=False, default=config.DEFAULT_EVENT_TIER)  # regular, major, final

    # Status
    status = db.Column(db.String(20), default='scheduled')  # scheduled, in_progress, completed
    is_finalized = db.Column(db.Boolean, nullable=False, default=False)
    finalized_at = db.Column(db.DateTime, nullable=True)

    # Relationships
    participants = db.relationship('EventParticipant', backref='event', lazy='dynamic',
                                   cascade='all, delete-orphan')
    scores = db.relationship('Score', backref='event', lazy='dynamic', cascade='all, delete-orphan')
    results = db.relationship('EventResult', backref='event', lazy='dynamic', cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Event {self.name} ({self.event_type})>'

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'event_date': self.event_date.isoformat() if self.event_date else None,
            'year': self.year,
            'event_type': self.event_type,
            'status': self.status,
            'is_finalized': bool(self.is_finalized),
            'finalized_at': self.finalized_at.isoformat() if self.finalized_at else None,
            'course': {'id': self.course.id, 'name': self.course.name} if self.course else None,
        }


class EventParticipant(db.Model):
    """A player entered in an event."""

    __tablename__ = 'event_participants'
    __table_args__ = (
        db.UniqueConstraint('event_id', 'player_id', name='uq_event_participant'),
    )

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey('events.id'), nullable=False)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id'), nullable=False)

    player = db.relationship('Player')

    def __repr__(self):
        return f'<EventParticipant event={self.event_id} player={self.player_id}>'


class EventResult(db.Model):
    """Official, write-once result of a player in a finalized event."""

    __tablename__ = 'event_results'
    __table_args__ = (
        db.UniqueConstraint('event_id', 'player_id', name='uq_event_result_player'),
        db.Index('ix_event_results_event_rank', 'event_id', 'rank'),
    )

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey('events.id'), nullable=False)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id'), nullable=False)

    # Scores
    gross_score = db.Column(db.Integer, nullable=False)
    net_score = db.Column(db.Numeric(6, 2), nullable=False)

    # Placement
    rank = db.Column(db.Integer, nullable=False)
    points = db.Column(db.Integer, nullable=False, default=0)

    # Handicap audit trail
    handicap_before = db.Column(db.Numeric(6, 2), nullable=False)
    handicap_after = db.Column(db.Numeric(6, 2), nullable=False)
    under_par_strokes = db.Column(db.Numeric(6, 2), nullable=False, default=0)

    player = db.relationship('Player')

    def __repr__(self):
        return f'<EventResult event={self.event_id} player={self.player_id} rank={self.rank}>'

    def to_dict(self) -> dict:
        return {
            'event_id': self.event_id,
            'player_id': self.player_id,
            'player_name': self.player.name if self.player else None,
            'gender': self.player.gender if self.player else None,
            'gross_score': self.gross_score,
            'net_score': float(self.net_score),
            'rank': self.rank,
            'points': self.points,
            'handicap_before': float(self.handicap_before),
            'handicap_after': float(self.handicap_after),
            'under_par_strokes': float(self.under_par_strokes),
        }


@sa_event.listens_for(EventResult, 'before_update')
def _reject_result_update(mapper, connection, target):
    raise ValueError(f'Event results are immutable (event={target.event_id}, player={target.player_id}).')
