"""Operator command to finalize (or dry-run check) one event outside HTTP.

Uses the same service as POST /api/events/<id>/finalize, so a failed or
interrupted finalization can simply be re-run here once the data is fixed.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Finalize a tour event and print its results as JSON.")
    parser.add_argument("event_id", type=int, help="Event to finalize.")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only print the pre-finalization validation report; write nothing.",
    )
    args = parser.parse_args(argv)

    from app import create_app
    from models import Event
    from services.errors import FinalizationError
    from services.event_inputs import load_event_inputs
    from services.finalization import finalize_event
    from services.validation import EventValidator

    app = create_app()
    with app.app_context():
        if args.check:
            event = Event.query.get(args.event_id)
            if event is None:
                print(json.dumps({"error": f"Event {args.event_id} not found.", "code": "not_found"}, indent=2))
                return 1
            report = EventValidator.validate_full(load_event_inputs(event)).to_dict()
            print(json.dumps(report, indent=2))
            return 0 if report["is_valid"] else 1

        try:
            outcome = finalize_event(args.event_id)
        except FinalizationError as exc:
            print(json.dumps(exc.to_dict(), indent=2))
            return 1
        print(json.dumps(outcome.to_dict(), indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
