"""
API routes for JSON endpoints.
Exposes the capacity engine to booking forms and calendar views.
"""

from flask import request, current_app, Blueprint

from ledger import get_ledger
from models.capacity import (
    check_beach_availability,
    check_boat_capacity,
    check_fishing_capacity,
    check_fishing_lock,
    get_beach_capacity_color,
    get_beach_day_capacity,
    get_blocked_fishing_dates_map,
    get_calendar_days,
    get_capacity_color,
    get_capacity_summary,
    get_day_capacity,
    get_fishing_base_availability,
    get_long_range_calendar_blocked_dates,
    get_overnight_conflicts,
)
from utils.api_response import api_success, api_error
from utils.datetime_helpers import format_date, get_today
from utils.messages import get_message
from utils.validators import (
    parse_count,
    parse_flag,
    sanitize_input,
    validate_date_format,
)

api_bp = Blueprint('api', __name__)


class RequestValidationError(ValueError):
    """Raised when query input cannot be handed to the engine."""


def _date_arg(value, default_today: bool = False) -> str:
    if not value:
        if default_today:
            return format_date(get_today())
        raise RequestValidationError(get_message('date_required'))
    if not validate_date_format(value):
        raise RequestValidationError(get_message('invalid_date', value=value))
    return value


def _count_arg(name: str, default: int = None) -> int:
    value = parse_count(request.args.get(name), default=default)
    if value is None:
        raise RequestValidationError(get_message('invalid_count', field=name))
    return value


def _days_arg(default: int) -> int:
    days = _count_arg('days', default=default)
    max_days = current_app.config.get('CALENDAR_MAX_DAYS', 366)
    if days < 1 or days > max_days:
        raise RequestValidationError(get_message('invalid_days', max_days=max_days))
    return days


def _resource_arg(value) -> str:
    resource = sanitize_input(value, max_length=100)
    if not resource:
        raise RequestValidationError(get_message('resource_required'))
    return resource


@api_bp.errorhandler(RequestValidationError)
def handle_validation_error(error):
    """Answer invalid query input with 400."""
    return api_error(str(error), status=400)


# =============================================================================
# HEALTH
# =============================================================================

@api_bp.route('/health')
def health_check():
    """
    Health check endpoint.

    Returns:
        JSON with status, version and the ledger currently served
    """
    ledger = get_ledger()
    return api_success(data={
        'status': 'ok',
        'app': current_app.config.get('APP_NAME'),
        'version': current_app.config.get('APP_VERSION'),
        'ledger_version': ledger.version,
        'ledger_days': len(ledger),
        'ledger_refreshed_at': (
            ledger.refreshed_at.isoformat() if ledger.refreshed_at else None
        ),
    })


# =============================================================================
# CAPACITY
# =============================================================================

@api_bp.route('/capacity/<date_str>')
def day_capacity(date_str):
    """
    Aggregated capacity for one date.

    Returns:
        JSON with the day capacity, its calendar label and color
    """
    date_str = _date_arg(date_str)
    ledger = get_ledger()

    return api_success(data={
        'capacity': get_day_capacity(ledger, date_str),
        'summary': get_capacity_summary(ledger, date_str),
        'color': get_capacity_color(ledger, date_str),
    })


@api_bp.route('/capacity/<date_str>/<resource>')
def beach_day_capacity(date_str, resource):
    """
    Capacity of one resource on one date.

    Returns:
        JSON with booked persons, remaining spots, fullness and color
    """
    date_str = _date_arg(date_str)
    resource = _resource_arg(resource)
    ledger = get_ledger()

    return api_success(data={
        'capacity': get_beach_day_capacity(ledger, date_str, resource),
        'color': get_beach_capacity_color(ledger, date_str, resource),
    })


# =============================================================================
# AVAILABILITY CHECKS
# =============================================================================

@api_bp.route('/availability/beach')
def beach_availability():
    """
    Can a party be booked at a beach?

    Query params:
        date: First day YYYY-MM-DD
        resource: Beach name
        party_size: Persons in the party
        overnight: 1/true for an overnight stay (optional)
        nights: Nights of the stay (optional, default 1 when overnight)

    Returns:
        JSON with can_book, reason and remaining_after
    """
    date_str = _date_arg(request.args.get('date'))
    resource = _resource_arg(request.args.get('resource'))
    party_size = _count_arg('party_size')
    is_overnight = parse_flag(request.args.get('overnight'))
    nights = _count_arg('nights', default=1 if is_overnight else 0)

    result = check_beach_availability(
        get_ledger(), date_str, resource, party_size,
        is_overnight=is_overnight, night_count=nights
    )
    return api_success(data=result)


@api_bp.route('/availability/fishing')
def fishing_availability():
    """
    Can a fishing trip be booked?

    Query params:
        date: Fishing day YYYY-MM-DD
        anglers: Anglers in the group
        type: Trip type (inshore, offshore, biggame; optional)

    Returns:
        JSON with can_book and message
    """
    date_str = _date_arg(request.args.get('date'))
    anglers = _count_arg('anglers')
    trip_type = sanitize_input(request.args.get('type'), max_length=50) or None

    result = check_fishing_capacity(get_ledger(), date_str, anglers, trip_type)
    return api_success(data=result)


@api_bp.route('/availability/boat')
def boat_availability():
    """
    Can a party ride the boat to a beach?

    Query params:
        date: Day YYYY-MM-DD
        persons: Passengers
        resource: Destination beach (optional)

    Returns:
        JSON with can_book, remaining_after and message
    """
    date_str = _date_arg(request.args.get('date'))
    persons = _count_arg('persons')
    resource = sanitize_input(request.args.get('resource'), max_length=100) or None

    result = check_boat_capacity(get_ledger(), date_str, persons, resource)
    return api_success(data=result)


# =============================================================================
# FISHING
# =============================================================================

@api_bp.route('/fishing/lock/<date_str>')
def fishing_lock(date_str):
    """Fishing lock state of the fishing base on a date."""
    date_str = _date_arg(date_str)
    return api_success(data=check_fishing_lock(get_ledger(), date_str))


@api_bp.route('/fishing/base/<date_str>')
def fishing_base_availability(date_str):
    """Availability of the fishing base for day visitors on a date."""
    date_str = _date_arg(date_str)
    return api_success(data=get_fishing_base_availability(get_ledger(), date_str))


@api_bp.route('/fishing/blocked-dates')
def fishing_blocked_dates():
    """
    Dates closed to new fishing bookings.

    Query params:
        start: First date YYYY-MM-DD (default: today)
        days: Window length (default: CALENDAR_HORIZON_DAYS)
        calendar: 'all' (default) or 'long_range' (offshore / big-game)

    Returns:
        JSON with {date: reason}
    """
    start = _date_arg(request.args.get('start'), default_today=True)
    days = _days_arg(current_app.config.get('CALENDAR_HORIZON_DAYS', 90))
    calendar = request.args.get('calendar', 'all')

    if calendar == 'all':
        blocked = get_blocked_fishing_dates_map(get_ledger(), start, days)
    elif calendar == 'long_range':
        blocked = get_long_range_calendar_blocked_dates(get_ledger(), start, days)
    else:
        raise RequestValidationError(get_message('invalid_calendar'))

    return api_success(data={
        'start': start,
        'days': days,
        'calendar': calendar,
        'blocked': blocked,
        'count': len(blocked),
    })


# =============================================================================
# CALENDAR
# =============================================================================

@api_bp.route('/calendar')
def calendar():
    """
    Label and color for each day of a calendar page.

    Query params:
        start: First date YYYY-MM-DD (default: today)
        days: Number of days (default 31)

    Returns:
        JSON list of days
    """
    start = _date_arg(request.args.get('start'), default_today=True)
    days = _days_arg(31)

    return api_success(data={
        'start': start,
        'days': get_calendar_days(get_ledger(), start, days),
    })


@api_bp.route('/overnights/conflicts')
def overnight_conflicts():
    """Days on which the ledger holds more than one active overnight."""
    conflicts = get_overnight_conflicts(get_ledger())
    return api_success(data={
        'conflicts': conflicts,
        'count': len(conflicts),
    })
