import os
import logging
from flask import Flask, jsonify, send_from_directory
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .config import config
from .errors import StoreError, StoreUnavailable
from .models import db
from .routes import BLUEPRINTS
from .stores import PlayerStore, TeamStore, TournamentStore

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """Application factory for the club records service."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__, static_folder='static')
    app.config.from_object(config.get(config_name, config['default']))

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)

    # Initialize stores; each gets the db handle and the store it references
    app.players = PlayerStore(db)
    app.teams = TeamStore(db, players=app.players)
    app.tournaments = TournamentStore(
        db,
        teams=app.teams,
        default_max_teams=app.config['DEFAULT_MAX_TEAMS']
    )

    # Create tables
    with app.app_context():
        db.create_all()

    for bp in BLUEPRINTS:
        app.register_blueprint(bp)

    register_error_handlers(app)
    register_routes(app)

    logger.info(f"Fennec FC service configured ({config_name})")
    return app


def configure_logging(app: Flask):
    level = getattr(logging, app.config['LOG_LEVEL'], logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    logging.getLogger('fennec').setLevel(level)


def register_error_handlers(app: Flask):
    """Map failures to JSON ``{"error": ...}`` responses."""

    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        db.session.rollback()
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e: SQLAlchemyError):
        db.session.rollback()
        logger.error(f"Database error: {e}")
        err = StoreUnavailable()
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        db.session.rollback()
        logger.exception("Unhandled error")
        return jsonify({'error': 'Something went wrong!'}), 500


def register_routes(app: Flask):
    """Register health check and the static entry page fallback."""

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        try:
            db.session.execute(db.text('SELECT 1'))
            db_ok = True
        except SQLAlchemyError as e:
            logger.warning(f"Health check failed: {e}")
            db.session.rollback()
            db_ok = False

        status = 'healthy' if db_ok else 'unhealthy'
        code = 200 if db_ok else 503

        return jsonify({
            'status': status,
            'database': 'connected' if db_ok else 'disconnected'
        }), code

    @app.route('/', defaults={'path': ''})
    @app.route('/<path:path>')
    def index(path: str):
        """Anything outside /api gets the single-page entry point."""
        if path == 'api' or path.startswith('api/'):
            return jsonify({'error': 'Not found'}), 404
        return send_from_directory(app.static_folder, 'index.html')
