"""Append-only handicap change log."""
from datetime import datetime
from database import db


class HandicapHistory(db.Model):
    """One handicap change caused by a finalized event."""

    __tablename__ = 'handicap_history'
    __table_args__ = (
        db.Index('ix_handicap_history_player_year', 'player_id', 'year'),
    )

    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id'), nullable=False)
    event_id = db.Column(db.Integer, db.ForeignKey('events.id'), nullable=True)
    year = db.Column(db.Integer, nullable=False)
    handicap_before = db.Column(db.Numeric(6, 2), nullable=False)
    handicap_after = db.Column(db.Numeric(6, 2), nullable=False)
    reason = db.Column(db.String(80), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            'player_id': self.player_id,
            'event_id': self.event_id,
            'year': self.year,
            'handicap_before': float(self.handicap_before),
            'handicap_after': float(self.handicap_after),
            'reason': self.reason,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
