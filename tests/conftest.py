"""Shared fixtures: an app on a throwaway SQLite file and a tour data builder."""
from datetime import date
from decimal import Decimal

import pytest

from app import create_app
from config import TestingConfig
from database import db
from models import (Course, CourseHole, Event, EventParticipant, Player,
                    PlayerSeasonStats, Score)

# Par 72: two identical nines of 4-4-3-5-4-4-3-5-4
STANDARD_PARS = [4, 4, 3, 5, 4, 4, 3, 5, 4] * 2
SEASON = 2026


def strokes_for_total(total: int, holes: int = 18) -> list:
    """Spread a gross total over holes as evenly as possible."""
    base, extra = divmod(total, holes)
    return [base + 1 if i < extra else base for i in range(holes)]


class TourBuilder:
    """Creates committed tour data for a test."""

    def course(self, name='Riverside', pars=None):
        course = Course(name=name)
        db.session.add(course)
        db.session.flush()
        for number, par in enumerate(STANDARD_PARS if pars is None else pars, start=1):
            db.session.add(CourseHole(course_id=course.id, hole_number=number, par=par))
        db.session.commit()
        return course

    def player(self, name, handicap=None, year=SEASON, total_points=0, participation_count=0, gender='M'):
        """Create a player; a season stats row is added when a handicap is given."""
        player = Player(name=name, gender=gender)
        db.session.add(player)
        db.session.flush()
        if handicap is not None:
            db.session.add(PlayerSeasonStats(
                player_id=player.id,
                year=year,
                initial_handicap=Decimal(str(handicap)),
                current_handicap=Decimal(str(handicap)),
                total_points=total_points,
                participation_count=participation_count,
            ))
        db.session.commit()
        return player

    def event(self, course, name='Monthly Medal', event_type='regular', year=SEASON, event_date=None,
              players=()):
        event = Event(
            name=name,
            course_id=course.id,
            event_type=event_type,
            year=year,
            event_date=event_date or date(year, 5, 10),
        )
        db.session.add(event)
        db.session.flush()
        for player in players:
            db.session.add(EventParticipant(event_id=event.id, player_id=player.id))
        db.session.commit()
        return event

    def card(self, event, player, strokes, putts=2):
        """Record hole scores; a None entry leaves that hole without a row."""
        for number, value in enumerate(strokes, start=1):
            if value is None:
                continue
            db.session.add(Score(event_id=event.id, player_id=player.id, hole_number=number,
                                 strokes=value, putts=putts))
        db.session.commit()

    def round_of(self, event, player, total):
        self.card(event, player, strokes_for_total(total))


@pytest.fixture
def app(tmp_path):
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f'sqlite:///{tmp_path / "tour.db"}'

    app = create_app(_Config)
    with app.app_context():
        yield app
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def tour(app):
    return TourBuilder()
