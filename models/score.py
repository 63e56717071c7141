"""
Per-hole score entries recorded during a round.
"""
from datetime import datetime
from database import db


class Score(db.Model):
    """Strokes and putts for one player on one hole of an event."""

    __tablename__ = 'scores'
    __table_args__ = (
        db.UniqueConstraint('event_id', 'player_id', 'hole_number', name='uq_score_event_player_hole'),
        db.Index('ix_scores_event_player', 'event_id', 'player_id'),
    )

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey('events.id'), nullable=False)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id'), nullable=False)
    hole_number = db.Column(db.Integer, nullable=False)

    strokes = db.Column(db.Integer, nullable=False, default=0)  # 0 = not played
    putts = db.Column(db.Integer, nullable=False, default=0)

    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<Score event={self.event_id} player={self.player_id} hole={self.hole_number}: {self.strokes}>'

    def to_dict(self) -> dict:
        return {
            'player_id': self.player_id,
            'hole_number': self.hole_number,
            'strokes': self.strokes,
            'putts': self.putts,
        }
