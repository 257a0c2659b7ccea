import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from resource_manager.config import config
from resource_manager.exceptions import ApiError
from resource_manager.extensions import db, cors, bcrypt
from resource_manager.logging_config import setup_logging

logger = logging.getLogger(__name__)

def create_app(config_name='default'):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    setup_logging(app)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app)  # Origins come from CORS_ORIGINS
    bcrypt.init_app(app)

    # Import models to ensure they're registered with SQLAlchemy
    from resource_manager.models import User, Project, Assignment  # noqa: F401

    # Register blueprints
    from resource_manager.routes import (
        auth_bp, engineers_bp, projects_bp, assignments_bp, utils_bp
    )

    app.register_blueprint(auth_bp)
    app.register_blueprint(engineers_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(assignments_bp)
    app.register_blueprint(utils_bp)

    from resource_manager.cli import seed_demo_command
    app.cli.add_command(seed_demo_command)

    register_error_handlers(app)

    # Create database tables
    with app.app_context():
        db.create_all()

    logger.info("Application created with %s configuration", config_name)
    return app

def register_error_handlers(app):
    from resource_manager.utils import respond

    @app.errorhandler(ApiError)
    def api_error(error):
        return respond(error.status_code, error.message, error.data)

    @app.errorhandler(404)
    def not_found(error):
        return respond(404, 'Resource not found')

    @app.errorhandler(405)
    def method_not_allowed(error):
        return respond(405, 'Method not allowed')

    @app.errorhandler(HTTPException)
    def http_error(error):
        return respond(error.code or 500, error.description or error.name)

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        logger.exception("Unhandled error: %s", error)
        return respond(500, 'Internal server error')
