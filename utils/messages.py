"""
Centralized user-facing messages.
Every capacity rule answers with one of these so the booking forms can
show which rule rejected a request.
"""

MESSAGES = {
    # Fishing lock
    'lock_today': 'Fishing trip booked today ({anglers} {angler_word}) - {base} reserved',
    'lock_today_inshore': 'Inshore fishing booked today - {base} reserved',
    'lock_yesterday': 'Fishing group from yesterday - {base} still reserved',
    'lock_generic': '{base} is reserved for a fishing trip. Please choose another beach or another day.',

    # Fishing quota / capacity
    'fishing_quota': (
        'A fishing group is already booked for this day. Only {max_groups} fishing '
        'group per day is allowed. Please choose another day.'
    ),
    'fishing_too_many_anglers': 'Maximum {max_anglers} anglers per fishing group. You requested {anglers}.',
    'fishing_no_anglers': 'At least 1 angler is required for a fishing trip.',
    'fishing_yesterday': "{base} is still reserved from yesterday's fishing trip. Please choose another day.",
    'fishing_today': 'A fishing trip is already booked today - {base} is reserved. Please choose another day.',
    'fishing_next_day': (
        'Fishing is already booked for {next_day}. Any fishing trip locks {base} for 2 days '
        '(today + next day), which would conflict. Please choose another day.'
    ),
    'fishing_next_day_inshore': (
        'Inshore fishing is booked for {next_day}. Any fishing trip locks {base} for 2 days. '
        'Please choose another day.'
    ),
    'fishing_base_full': (
        'Not enough spots at {base} for {anglers} anglers ({booked}/{ceiling} spots used). '
        '{base} has tourists booked.'
    ),
    'fishing_ok': '{trip} trip available! {anglers} {angler_word} departing from {base}.',

    # Fishing calendar
    'blocked_today': 'Fishing already booked ({types})',
    'blocked_yesterday': "Loco reserved (yesterday's {types} fishing)",
    'blocked_tomorrow': 'Fishing booked tomorrow ({types}) - would conflict',
    'long_range_blocked_today': 'Fishing booked: {types} ({anglers} anglers)',
    'long_range_blocked_yesterday': 'Loco reserved from {origin} fishing ({types})',

    # Beach capacity
    'beach_full': (
        '{resource} is fully booked for this day ({booked}/{ceiling} spots). '
        'Please choose another beach or another day.'
    ),
    'beach_not_enough': (
        'Only {remaining} {spot_word} left at {resource} ({booked}/{ceiling}). Your group '
        'needs {party_size}. Please reduce your group or choose another day.'
    ),
    'beach_invalid_party': 'Party size must be at least 1.',
    'beach_fill': 'This will fill {resource} completely!',
    'beach_remaining': '{remaining} {spot_word} will remain at {resource} after your booking.',

    # Overnight
    'overnight_taken': (
        '{date} already has {existing}. Only one overnight per day is allowed. '
        'Please choose different dates.'
    ),
    'overnight_existing_fishing': 'a fishing trip (overnight at Loco)',
    'overnight_existing_stay': 'an overnight stay at {resource}',
    'overnight_existing_unknown': 'another overnight booking',
    'overnight_base_locked': (
        '{base} is reserved by a fishing trip on {date}. Cannot book overnight at Loco. '
        'Please choose another beach or different dates.'
    ),
    'overnight_spill_full': (
        "{resource} doesn't have enough spots on {date} (day {day_number} of your stay). "
        '{booked}/{ceiling} spots used.'
    ),

    # Boat
    'boat_select_beach': 'Select a beach to check availability.',

    # Fishing base summary
    'base_full': '{base} is full ({ceiling}/{ceiling} spots)',
    'base_available': '{remaining} {spot_word} available at Loco',

    # Day labels
    'label_available': 'Available',
    'label_base_locked': 'Loco Reserved (Fishing)',
    'label_overnight': 'Overnight booked',
    'label_booked': '{persons} booked',

    # Request validation (HTTP layer)
    'date_required': 'Date is required (YYYY-MM-DD)',
    'invalid_date': 'Invalid date: {value}. Use YYYY-MM-DD',
    'resource_required': 'Resource name is required',
    'invalid_count': '{field} must be a whole number',
    'invalid_days': 'days must be between 1 and {max_days}',
    'invalid_calendar': "calendar must be 'all' or 'long_range'",
}


def get_message(key: str, **kwargs) -> str:
    """
    Get message with optional formatting.

    Args:
        key: Message key
        **kwargs: Format parameters

    Returns:
        Formatted message or key if not found
    """
    message = MESSAGES.get(key, key)
    if kwargs:
        return message.format(**kwargs)
    return message


def plural(count: int, singular: str, plural_form: str = None) -> str:
    """Pick singular or plural word for a count."""
    if count == 1:
        return singular
    return plural_form or f'{singular}s'
