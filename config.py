"""Configuration constants and runtime profiles for the app."""
import os
from decimal import Decimal


def _normalized_database_url() -> str:
    url = os.environ.get('DATABASE_URL', 'sqlite:///golftour.db')
    if url.startswith('postgres://'):
        return url.replace('postgres://', 'postgresql://', 1)
    return url


class BaseConfig:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')
    SQLALCHEMY_DATABASE_URI = _normalized_database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}
    SQLITE_BUSY_TIMEOUT = int(os.environ.get('SQLITE_BUSY_TIMEOUT', '30'))
    STRUCTURED_LOGGING = os.environ.get('STRUCTURED_LOGGING', '1') == '1'
    SENTRY_DSN = os.environ.get('SENTRY_DSN', '').strip()


class DevelopmentConfig(BaseConfig):
    ENV_NAME = 'development'


class ProductionConfig(BaseConfig):
    ENV_NAME = 'production'


class TestingConfig(BaseConfig):
    ENV_NAME = 'testing'
    TESTING = True
    STRUCTURED_LOGGING = False
    SENTRY_DSN = ''


def get_config():
    env = os.environ.get('FLASK_ENV', '').strip().lower()
    if env == 'production' or os.environ.get('PRODUCTION', '').strip() == '1':
        return ProductionConfig
    return DevelopmentConfig


def validate_runtime(app_config: dict) -> None:
    """Fail fast for production misconfiguration."""
    env_name = app_config.get('ENV_NAME', 'development')
    if env_name != 'production':
        return

    secret = app_config.get('SECRET_KEY') or ''
    weak_values = {'dev-key-change-in-production', 'changeme', 'secret', 'default'}
    if len(secret) < 16 or secret.lower() in weak_values:
        raise RuntimeError('Invalid SECRET_KEY for production. Set a strong random secret.')


# Event tiers
DEFAULT_EVENT_TIER = 'regular'

# Season points by tier and finishing rank (6th and below score nothing)
POINTS_TABLE = {
    'regular': {1: 16, 2: 8, 3: 4, 4: 2, 5: 1},
    'major': {1: 21, 2: 12, 3: 7, 4: 4, 5: 2},
    'final': {1: 26, 2: 16, 3: 10, 4: 6, 5: 3},
}

# Handicap revision for the top finishers
HANDICAP_REVISION_MAX_RANK = 3
HANDICAP_COEFFICIENTS = {
    1: Decimal('0.7'),
    2: Decimal('0.8'),
    3: Decimal('0.9'),
}
HANDICAP_BONUS = {
    1: Decimal('3'),
    2: Decimal('2'),
    3: Decimal('1'),
}
HANDICAP_HISTORY_REASON = 'in_season_revision'

# Course layout
HOLES_PER_ROUND = 18
VALID_PARS = (3, 4, 5)
