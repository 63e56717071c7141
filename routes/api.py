"""JSON API endpoints for event finalization, results, and season standings."""
from flask import Blueprint, jsonify, request
from models import Course, Event, Score
from services.errors import BadRequest, FinalizationError, NotFound
from services.finalization import finalize_event
from services.event_inputs import load_event_inputs
from services.standings import get_annual_standings, get_event_results, get_handicap_history, list_events
from services.validation import EventValidator

api_bp = Blueprint('api', __name__)


@api_bp.errorhandler(FinalizationError)
def handle_finalization_error(exc: FinalizationError):
    return jsonify(exc.to_dict()), exc.status_code


def _int_arg(name: str, required: bool = False):
    """Parse an integer query argument or raise BadRequest."""
    raw = request.args.get(name)
    if raw is None or raw == '':
        if required:
            raise BadRequest(f'Query parameter {name!r} is required.')
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise BadRequest(f'Query parameter {name!r} must be an integer, got {raw!r}.')


def _event_or_404(event_id: int) -> Event:
    event = Event.query.get(event_id)
    if event is None:
        raise NotFound(f'Event {event_id} not found.')
    return event


@api_bp.route('/events')
def events_index():
    events = list_events(
        year=_int_arg('year'),
        status=request.args.get('status'),
        finalized_only=request.args.get('finalized') == 'true',
    )
    return jsonify([event.to_dict() for event in events])


@api_bp.route('/events/<int:event_id>')
def event_detail(event_id):
    event = _event_or_404(event_id)
    course = Course.query.get(event.course_id)
    scores = Score.query.filter_by(event_id=event.id).order_by(Score.player_id, Score.hole_number).all()
    payload = event.to_dict()
    payload['course'] = {
        'id': course.id,
        'name': course.name,
        'par': course.par,
        'holes': [hole.to_dict() for hole in course.get_holes_sorted()],
    } if course else None
    payload['participants'] = [
        {'player_id': p.player_id, 'name': p.player.name if p.player else None}
        for p in event.participants.all()
    ]
    payload['scores'] = [score.to_dict() for score in scores]
    return jsonify(payload)


@api_bp.route('/events/<int:event_id>/validation')
def event_validation(event_id):
    """Pre-finalization report: what would abort and who would be excluded."""
    event = _event_or_404(event_id)
    result = EventValidator.validate_full(load_event_inputs(event))
    return jsonify(result.to_dict())


@api_bp.route('/events/<int:event_id>/finalize', methods=['POST'])
def finalize(event_id):
    outcome = finalize_event(event_id)
    return jsonify(outcome.to_dict())


@api_bp.route('/events/<int:event_id>/results')
def event_results(event_id):
    return jsonify([row.to_dict() for row in get_event_results(event_id)])


@api_bp.route('/rankings/annual')
def annual_rankings():
    year = _int_arg('year', required=True)
    limit = _int_arg('limit')
    payload = []
    for rank, stats in get_annual_standings(year, limit=limit):
        row = stats.to_dict()
        row['rank'] = rank
        payload.append(row)
    return jsonify(payload)


@api_bp.route('/players/<int:player_id>/handicap-history')
def handicap_history(player_id):
    rows = get_handicap_history(player_id, year=_int_arg('year'))
    return jsonify([row.to_dict() for row in rows])
