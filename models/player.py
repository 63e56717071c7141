"""
Player and per-season statistics models.
"""
from database import db


class Player(db.Model):
    """Represents a tour member who can be entered into events."""

    __tablename__ = 'players'

    id = db.Column(db.Integer, primary_key=True)

    # Personal info
    name = db.Column(db.String(200), nullable=False)
    gender = db.Column(db.String(1), nullable=True)  # 'M' or 'F'

    # Relationships
    season_stats = db.relationship('PlayerSeasonStats', backref='player', lazy='dynamic',
                                   cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Player {self.name}>'


class PlayerSeasonStats(db.Model):
    """Season-cumulative handicap and points for one player."""

    __tablename__ = 'player_season_stats'
    __table_args__ = (
        db.UniqueConstraint('player_id', 'year', name='uq_player_season_stats_player_year'),
        db.Index('ix_player_season_stats_year_points', 'year', 'total_points'),
    )

    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id'), nullable=False)
    year = db.Column(db.Integer, nullable=False)

    # Handicap
    initial_handicap = db.Column(db.Numeric(6, 2), nullable=False, default=0)
    current_handicap = db.Column(db.Numeric(6, 2), nullable=False, default=0)

    # Season totals
    total_points = db.Column(db.Integer, nullable=False, default=0)
    participation_count = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f'<PlayerSeasonStats player={self.player_id} year={self.year}>'

    def to_dict(self) -> dict:
        return {
            'player_id': self.player_id,
            'player_name': self.player.name if self.player else None,
            'gender': self.player.gender if self.player else None,
            'year': self.year,
            'initial_handicap': float(self.initial_handicap),
            'current_handicap': float(self.current_handicap),
            'total_points': self.total_points,
            'participation_count': self.participation_count,
        }
