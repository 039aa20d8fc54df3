# art_portfolio/config.py
import os
from datetime import timedelta
from dotenv import load_dotenv

CONFIG_FILE_DIR = os.path.abspath(os.path.dirname(__file__))
PROJECT_ROOT = os.path.dirname(CONFIG_FILE_DIR)

DEFAULT_SECRET = 'thisshouldbeabettersecret'

# Local .env files are only honoured outside production
if os.environ.get('FLASK_ENV', 'development') != 'production':
    load_dotenv(os.path.join(PROJECT_ROOT, '.env'))


SCRIPT_SRC_URLS = [
    "https://stackpath.bootstrapcdn.com/",
    "https://kit.fontawesome.com/",
    "https://cdnjs.cloudflare.com/",
    "https://cdn.jsdelivr.net",
    "https://res.cloudinary.com/dz0twneew/",
]
STYLE_SRC_URLS = [
    "https://kit-free.fontawesome.com/",
    "https://stackpath.bootstrapcdn.com/",
    "https://fonts.googleapis.com/",
    "https://use.fontawesome.com/",
    "https://cdn.jsdelivr.net",
    "https://res.cloudinary.com/dz0twneew/",
]
CONNECT_SRC_URLS = [
    "https://res.cloudinary.com/dz0twneew/",
]
FONT_SRC_URLS = []


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET', DEFAULT_SECRET)
    DEBUG = False
    TESTING = False
    PORT = int(os.environ.get('PORT', 3000))

    SQLALCHEMY_DATABASE_URI = os.environ.get('DB_URL') or \
        'sqlite:///' + os.path.join(PROJECT_ROOT, 'instance', 'art_portfolio.sqlite3')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False

    # --- Sessions ---
    SESSION_COOKIE_NAME = 'session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_TOUCH_AFTER = timedelta(hours=24)
    SESSION_SAVE_UNINITIALIZED = True

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    LOG_FILE = os.environ.get('LOG_FILE', None)

    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', "memory://")
    RATELIMIT_STRATEGY = "fixed-window"
    RATELIMIT_HEADERS_ENABLED = True
    AUTH_RATELIMITS = "20 per minute;200 per hour"

    WTF_CSRF_ENABLED = True

    CONTENT_SECURITY_POLICY = {
        'default-src': ["'self'"],
        'connect-src': ["'self'"] + CONNECT_SRC_URLS,
        'script-src': ["'unsafe-inline'", "'self'"] + SCRIPT_SRC_URLS,
        'style-src': ["'self'", "'unsafe-inline'"] + STYLE_SRC_URLS,
        'worker-src': ["'self'", "blob:"],
        'object-src': ["'none'"],
        'img-src': [
            "'self'",
            "blob:",
            "data:",
            "https://res.cloudinary.com/dz0twneew/",
            "https://images.unsplash.com/",
        ],
        'font-src': ["'self'"] + FONT_SRC_URLS,
    }
    TALISMAN_FORCE_HTTPS = False


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = os.environ.get('TEST_DB_URL', 'sqlite:///:memory:')
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False

    @classmethod
    def check(cls):
        if cls.SECRET_KEY == DEFAULT_SECRET:
            raise ValueError("Production SECRET is not set or is using the default value.")


config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig,
    default=DevelopmentConfig
)


def get_config_by_name(config_name):
    config_class = config_by_name.get(config_name, DevelopmentConfig)
    if hasattr(config_class, 'check'):
        config_class.check()
    return config_class
