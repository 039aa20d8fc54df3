# art_portfolio/__init__.py
import os
import logging
from logging.handlers import RotatingFileHandler
from flask import Flask, g, get_flashed_messages, send_from_directory
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_talisman import Talisman
from flask_wtf.csrf import CSRFProtect

from .config import get_config_by_name
from .models import db, User

# Initialize extensions without app object yet
migrate = Migrate()
login_manager = LoginManager()
limiter = Limiter(key_func=get_remote_address)
talisman = Talisman()
csrf = CSRFProtect()

login_manager.login_view = 'auth.login'
login_manager.login_message = 'You must be signed in first!'
login_manager.login_message_category = 'error'


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


def _configure_logging(app):
    if app.testing:
        return
    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO').upper(), logging.INFO)
    formatter = logging.Formatter('%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    log_file = app.config.get('LOG_FILE')
    if log_file and not app.debug:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024 * 100, backupCount=20)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    if not app.logger.handlers: app.logger.addHandler(handler)
    # app.logger is the 'art_portfolio' logger, so module loggers propagate into it
    app.logger.setLevel(log_level)


def create_app(config_name=None, artwork_repository=None):
    """
    Builds the portfolio application.

    Args:
        config_name (str): 'development', 'testing' or 'production'. Read from
            FLASK_ENV when omitted.
        artwork_repository (ArtworkRepository): Storage backend for artworks.
            The SQLAlchemy repository is used when omitted.
    """
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'default')

    app_config = get_config_by_name(config_name)

    app = Flask(__name__, instance_path=os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'instance'))
    app.config.from_object(app_config)

    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        app.logger.warning(f"Could not create instance folder at {app.instance_path}")

    _configure_logging(app)
    app.logger.info(f"Art portfolio starting with config: {config_name}")

    # --- Request pipeline ---
    from .middleware import MethodOverrideMiddleware, SanitizedRequest
    from .session_store import DatabaseSessionInterface
    app.request_class = SanitizedRequest
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)
    app.session_interface = DatabaseSessionInterface()

    # Initialize extensions with app object
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    limiter.init_app(app)
    csrf.init_app(app)
    talisman.init_app(
        app,
        content_security_policy=app.config.get('CONTENT_SECURITY_POLICY'),
        force_https=app.config.get('TALISMAN_FORCE_HTTPS', False),
        strict_transport_security=app.config.get('TALISMAN_FORCE_HTTPS', False),
        session_cookie_secure=app.config.get('SESSION_COOKIE_SECURE', False),
        session_cookie_http_only=app.config.get('SESSION_COOKIE_HTTPONLY', True),
        frame_options='DENY',
        referrer_policy='strict-origin-when-cross-origin',
    )

    from .services import ArtworkService
    app.artwork_service = ArtworkService(artwork_repository)
    app.logger.info("ArtworkService initialized and attached to app.")

    # Register Blueprints
    from .auth.routes import auth_bp
    app.register_blueprint(auth_bp)

    from .artworks.routes import artworks_bp
    app.register_blueprint(artworks_bp)

    from .pages.routes import pages_bp
    app.register_blueprint(pages_bp)

    app.logger.info("Blueprints registered.")

    from .errors import register_error_handlers
    register_error_handlers(app)

    from .commands import register_commands
    register_commands(app)

    @app.before_request
    def stage_flash_messages():
        g.success = get_flashed_messages(category_filter=['success'])
        g.error = get_flashed_messages(category_filter=['error'])

    @app.context_processor
    def inject_locals():
        return dict(
            success=g.get('success', []),
            error=g.get('error', []),
        )

    @app.route('/public/<path:filepath>')
    def serve_public_asset(filepath):
        return send_from_directory(app.static_folder, filepath)

    return app
