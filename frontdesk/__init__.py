"""
Flask Application Factory

This module implements the application factory pattern for creating
front desk application instances with different configurations.
"""

import logging
import os

from flask import Flask, Response, render_template
from flask.logging import default_handler

from frontdesk.config import config
from frontdesk.extensions import login_manager, limiter
from frontdesk.services.front_desk import FrontDesk
from frontdesk.services.ids import IdGenerator
from frontdesk.sessions import MemorySessionStore, ServerSideSessionInterface, SessionStore
from frontdesk.storage.errors import RecordStoreError
from frontdesk.storage.record_store import RecordStore


def create_app(config_name='default', overrides=None, session_store: SessionStore = None,
               id_generator: IdGenerator = None):
    """
    Application factory function

    Args:
        config_name (str): Configuration name ('development', 'production', 'testing')
        overrides (dict): Extra config values applied after the config class
        session_store (SessionStore): Server-side session store; in-memory by default
        id_generator (IdGenerator): Source of guest/task ids; random uuid4 hex by default

    Returns:
        Flask: Configured Flask application instance
    """

    # Normalize config name
    config_name = (config_name or 'default').lower()

    # Create Flask app instance
    app = Flask(__name__)

    # Load configuration
    cfg = config.get(config_name) or config['default']
    app.config.from_object(cfg)
    if overrides:
        app.config.update(overrides)

    configure_logging(app)

    # Ensure SECRET_KEY exists: it signs the session id cookie and CSRF tokens.
    # - Production: enforced via environment variable (fail fast).
    # - Development/testing: generate an ephemeral key if missing.
    if not app.config.get('SECRET_KEY'):
        if config_name == 'production':
            app.logger.error('Production requires SECRET_KEY to be set via environment variable')
            raise RuntimeError('Missing SECRET_KEY in production')
        app.config['SECRET_KEY'] = os.urandom(32)
        app.logger.warning('SECRET_KEY was missing; generated an ephemeral key for this process.')

    # Ensure data folder exists
    os.makedirs(app.config['DATA_DIR'], exist_ok=True)

    # Sessions live server-side; the cookie only carries a signed id.
    if session_store is None:
        session_store = MemorySessionStore(
            ttl_seconds=int(app.permanent_session_lifetime.total_seconds())
        )
    app.session_interface = ServerSideSessionInterface(session_store)

    # Record store + domain service, one per app
    store = RecordStore(app.config['DATA_DIR'])
    app.extensions['frontdesk'] = FrontDesk(store, id_generator=id_generator)

    # Initialize extensions
    login_manager.init_app(app)
    limiter.init_app(app)

    # Register the user loader
    from frontdesk import models  # noqa: F401

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register template context processors
    register_template_processors(app)

    # Register CLI commands
    register_cli_commands(app)

    app.logger.info('Front desk ready (config=%s, data_dir=%s)', config_name, store.data_dir)

    @app.route('/favicon.ico')
    def favicon_placeholder():  # pragma: no cover - trivial route
        return ('', 204)

    return app


def configure_logging(app):
    """Apply LOG_LEVEL to the app logger and the package loggers."""

    level = app.config.get('LOG_LEVEL', 'INFO')
    app.logger.setLevel(level)

    package_logger = logging.getLogger('frontdesk')
    package_logger.setLevel(level)
    if not package_logger.handlers:
        package_logger.addHandler(default_handler)


def register_blueprints(app):
    """Register Flask blueprints"""

    from frontdesk.routes.main import main_bp
    from frontdesk.routes.auth import auth_bp
    from frontdesk.routes.reception import reception_bp
    from frontdesk.routes.housekeeping import housekeeping_bp
    from frontdesk.routes.health import health_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(reception_bp)
    app.register_blueprint(housekeeping_bp)
    app.register_blueprint(health_bp)  # No prefix - accessible at /health


def register_error_handlers(app):
    """Register error handlers for common HTTP errors"""

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors"""
        return render_template('errors/404.html', title='Not Found'), 404

    @app.errorhandler(RecordStoreError)
    def record_store_error(error):
        """Data file failures that escaped a view"""
        app.logger.error('Record store failure: %s', error, exc_info=error)
        return Response('Internal server error', status=500, mimetype='text/plain')

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        app.logger.exception('Unhandled exception (500): %s', error)
        return Response('Internal server error', status=500, mimetype='text/plain')


def register_template_processors(app):
    """Register context processors for templates"""

    @app.context_processor
    def inject_site_config():
        """Inject site configuration into all templates"""
        from flask import session

        return {
            'site_name': app.config['SITE_NAME'],
            'session_role': session.get('role'),
        }


def register_cli_commands(app):
    """Register custom Flask CLI commands."""
    from frontdesk.cli import seed_data_command

    app.cli.add_command(seed_data_command)
