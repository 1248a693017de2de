import re

from flask import request

from epex.errors import InvalidInput

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_FULL_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


def json_body():
    """Parsed JSON object of the current request; anything else reads as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(data, key):
    value = data.get(key)
    return value if isinstance(value, str) else ''


def is_valid_email(email):
    return bool(EMAIL_PATTERN.match((email or '').strip()))


def validate_signup_input(data):
    """Check a signup body; the first failing rule raises InvalidInput."""
    email = _text(data, 'email')
    full_name = _text(data, 'fullName')
    password = _text(data, 'password')

    if not email or not full_name or not password:
        raise InvalidInput('All fields are required')
    if not is_valid_email(email):
        raise InvalidInput('Invalid email format')
    if len(full_name.strip()) < MIN_FULL_NAME_LENGTH:
        raise InvalidInput(f'Full name must be at least {MIN_FULL_NAME_LENGTH} characters')
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    return email, full_name, password


def validate_signin_input(data):
    email = _text(data, 'email')
    password = _text(data, 'password')

    if not email or not password:
        raise InvalidInput('Email and password are required')
    if not is_valid_email(email):
        raise InvalidInput('Invalid email format')
    return email, password
