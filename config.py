"""
Flask application configuration classes.
Provides configuration for development, production, and testing environments.
"""

import os


class Config:
    """Base configuration class with common settings."""

    # Ledger snapshot (already-parsed JSON produced by the sync job)
    LEDGER_PATH = os.environ.get('LEDGER_PATH') or 'instance/ledger.json'

    # Calendar window for bulk blocked-date maps
    CALENDAR_HORIZON_DAYS = int(os.environ.get('CALENDAR_HORIZON_DAYS', 90))
    CALENDAR_MAX_DAYS = 366

    # Timezone
    TIMEZONE = os.environ.get('TIMEZONE') or 'America/Panama'

    # Application settings
    APP_NAME = 'Cebaco Capacity'
    APP_VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False

    LEDGER_PATH = os.environ.get('LEDGER_PATH') or Config.LEDGER_PATH

    @classmethod
    def validate(cls) -> None:
        """Validate that required production environment variables are set."""
        if not os.environ.get('LEDGER_PATH'):
            raise ValueError("LEDGER_PATH environment variable must be set in production")


class TestConfig(Config):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    LEDGER_PATH = os.environ.get('TEST_LEDGER_PATH', '')


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestConfig,
    'default': DevelopmentConfig
}
