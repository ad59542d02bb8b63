"""
Flask application for HTTP reporting.

Provides:
- GET /health: Service health check
- GET /attendance/today: Names marked today
- GET /attendance/<day>: Names marked on a given ledger date

Read-only: the ledger is never written from here.
"""

from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from .config import Config
from .ledger import AttendanceLedger
from .logging_config import get_logger
from .session import AttendanceSession

logger = get_logger(__name__)


def create_app(config: Config, session: Optional[AttendanceSession] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration
        session: Session used for the current date (built from config when None)

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    CORS(app)

    if session is None:
        session = AttendanceSession(
            AttendanceLedger(config.attendance_file),
            cooldown_seconds=config.mark_cooldown_seconds,
            zero_pad_dates=config.zero_pad_dates,
        )
    ledger = session.ledger

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return jsonify({
            'status': 'ok',
            'attendanceFile': str(ledger.path),
            'date': session.today(),
        })

    @app.route('/attendance/today')
    def attendance_today():
        """Names recorded for today, read fresh from the ledger."""
        day = session.today()
        return jsonify({'date': day, 'names': sorted(ledger.names_for(day))})

    @app.route('/attendance/<day>')
    def attendance_for_day(day: str):
        """Names recorded for a given date string."""
        return jsonify({'date': day, 'names': sorted(ledger.names_for(day))})

    return app
