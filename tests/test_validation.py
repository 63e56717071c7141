"""Tests for course and participant validation."""
from types import SimpleNamespace

from models import Score
from database import db
from services.event_inputs import load_event_inputs
from services.validation import CourseValidator, EventValidator, ParticipantValidator


def _holes(pars):
    return [SimpleNamespace(hole_number=i, par=par) for i, par in enumerate(pars, start=1)]


class TestCourseValidator:
    def test_standard_course(self):
        assert CourseValidator.validate(1, _holes([4] * 18)).is_valid

    def test_no_holes(self):
        result = CourseValidator.validate(1, [])
        assert [e.code for e in result.errors] == ['no_holes']

    def test_short_course(self):
        result = CourseValidator.validate(1, _holes([4] * 9))
        assert [e.code for e in result.errors] == ['hole_numbering']

    def test_invalid_par(self):
        pars = [4] * 18
        pars[0] = 2
        result = CourseValidator.validate(1, _holes(pars))
        assert [e.code for e in result.errors] == ['invalid_par']


class TestEventValidator:
    def test_reports_exclusions_as_warnings(self, tour):
        course = tour.course()
        ok = tour.player('Ok', handicap=2)
        bad = tour.player('Bad', handicap=2)
        event = tour.event(course, players=[ok, bad])
        db.session.add(Score(event_id=event.id, player_id=bad.id, hole_number=1, strokes=-3))
        db.session.commit()

        inputs = load_event_inputs(event)
        assert ParticipantValidator.validate(inputs, ok.id).is_valid
        assert not ParticipantValidator.validate(inputs, bad.id).is_valid

        report = EventValidator.validate_full(inputs)
        assert report.is_valid
        assert [w.code for w in report.warnings] == ['malformed_scores']

    def test_unknown_tier_is_a_warning(self, tour):
        player = tour.player('P', handicap=2)
        event = tour.event(tour.course(), event_type='invitational', players=[player])

        report = EventValidator.validate_full(load_event_inputs(event))
        assert report.is_valid
        assert [w.code for w in report.warnings] == ['unknown_event_type']

    def test_empty_roster_is_an_error(self, tour):
        event = tour.event(tour.course())
        report = EventValidator.validate_full(load_event_inputs(event))
        assert [e.code for e in report.errors] == ['no_participants']
