"""Flask application entry point."""

import logging
import sqlite3

from flask import Flask, jsonify
from flask_cors import CORS

from .config import settings
from .db import init_db
from .exceptions import NoteKeeperError, PersistenceError

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create Flask app
app = Flask(__name__)

# CORS configuration
CORS(app, origins=settings.cors_origins, supports_credentials=True)


# Database initialization (runs once on app startup)
def initialize_database():
    """Initialize database on app startup."""
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


with app.app_context():
    initialize_database()


# Error handlers
def _error_response(error: NoteKeeperError, error_type: str | None = None):
    body = {
        "message": error.message,
        "error": {
            "type": error_type or error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        body["error"]["details"] = error.details
    return jsonify(body), error.status_code


@app.errorhandler(NoteKeeperError)
def handle_notekeeper_error(error):
    """Handle every NoteKeeperError with its own status code."""
    return _error_response(error)


@app.errorhandler(sqlite3.Error)
def handle_database_error(error):
    """Map storage failures to a generic client-facing PersistenceError."""
    logger.exception(f"Database error: {error}")
    return _error_response(PersistenceError("Error executing query"))


@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "message": "An internal error occurred",
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


# Health check endpoint
@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


# Register blueprints
from .auth.api import auth_bp
from .api.notes import notes_bp

app.register_blueprint(auth_bp)
app.register_blueprint(notes_bp)


def run():
    """Console entry point: serve on settings.host and settings.port."""
    logger.info(f"Server is running on port {settings.port}")
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    run()
