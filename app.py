"""
Cebaco Capacity - availability engine for beach, boat, fishing and overnight bookings
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import ledger_store

# Import ledger functions
from ledger import get_ledger, release_ledger


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    if config_name == 'production':
        config[config_name].validate()

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    # Configure logging
    configure_logging(app)

    # Initialize extensions
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_cli_commands(app)

    # Register teardown handlers
    register_teardown_handlers(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    # Load the ledger snapshot (if LEDGER_PATH exists)
    ledger_store.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.api.routes import api_bp

    app.register_blueprint(api_bp, url_prefix='/api')


def register_error_handlers(app):
    """Register error handlers."""
    from utils.api_response import api_error

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        return api_error('Not found', status=404)

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle 405 errors."""
        return api_error('Method not allowed', status=405)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        app.logger.error('Internal error: %s', error)
        return api_error('Internal server error', status=500)


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('load-ledger')
    @click.argument('path')
    def load_ledger_command(path):
        """Load a JSON ledger snapshot and report what it holds."""
        with app.app_context():
            before = ledger_store.version
            snapshot = ledger_store.load_file(path)
            if ledger_store.version == before:
                click.echo(f'Ledger not replaced (see log): {path}', err=True)
                return
            click.echo(
                f'Ledger version {snapshot.version} loaded: {len(snapshot)} day(s), '
                f'{len(snapshot.fishing_dates())} with fishing'
            )

    @app.cli.command('capacity-report')
    @click.argument('start_date')
    @click.argument('days', type=int, default=14)
    def capacity_report_command(start_date, days):
        """Print a per-day capacity report starting at START_DATE."""
        from models.capacity import build_capacity_report
        from utils.validators import validate_date_format

        if not validate_date_format(start_date):
            click.echo(f'Invalid date: {start_date}. Use YYYY-MM-DD', err=True)
            return

        with app.app_context():
            click.echo(build_capacity_report(get_ledger(), start_date, days))

    @app.cli.command('blocked-fishing-dates')
    def blocked_fishing_dates_command():
        """List every date closed to new fishing bookings."""
        from models.capacity import get_blocked_fishing_dates_map

        with app.app_context():
            blocked = get_blocked_fishing_dates_map(get_ledger())
            if not blocked:
                click.echo('No blocked fishing dates')
                return
            for date in sorted(blocked):
                click.echo(f'{date}  {blocked[date]}')


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_ledger(error):
        """Release the request's pinned ledger snapshot."""
        release_ledger(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/capacity.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        logging.getLogger('ledger').addHandler(file_handler)
        logging.getLogger('models').addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Cebaco Capacity startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(host='0.0.0.0', debug=True)
