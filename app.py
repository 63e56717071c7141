"""
Flask application entry point for the Golf Tour Manager.
"""
import os
from flask import Flask, jsonify
from database import init_db
import config
from services.logging_setup import configure_error_monitoring, configure_logging


def _apply_sqlite_engine_options(app):
    """Give file-backed SQLite a busy timeout and allow pooled connections across threads."""
    if not app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite'):
        return
    options = dict(app.config.get('SQLALCHEMY_ENGINE_OPTIONS') or {})
    connect_args = dict(options.get('connect_args') or {})
    connect_args.setdefault('timeout', app.config.get('SQLITE_BUSY_TIMEOUT', 30))
    connect_args.setdefault('check_same_thread', False)
    options['connect_args'] = connect_args
    app.config['SQLALCHEMY_ENGINE_OPTIONS'] = options


def create_app(config_object=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object or config.get_config())
    config.validate_runtime(app.config)
    configure_logging(bool(app.config.get('STRUCTURED_LOGGING', True)))
    configure_error_monitoring(app.config.get('SENTRY_DSN', ''), app.config.get('ENV_NAME', 'development'))

    # Initialize database
    _apply_sqlite_engine_options(app)
    init_db(app)

    # Register blueprints
    from routes.api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found.', 'code': 'not_found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'Internal server error.', 'code': 'internal_error'}), 500

    return app


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app = create_app()
    app.run(host='0.0.0.0', port=port, debug=False)
