from flask import Blueprint, jsonify, current_app

from epex.errors import InvalidCredentials
from epex.validation import json_body, validate_signup_input, validate_signin_input

auth = Blueprint('auth', __name__)


def _session_payload(message, user):
    tokens = current_app.extensions['epex.tokens']
    return {
        'success': True,
        'message': message,
        'token': tokens.issue(user.id, user.email),
        'user': user.to_dict(),
    }


@auth.route('/signup', methods=['POST'])
def signup():
    data = json_body()
    email, full_name, password = validate_signup_input(data)

    # Hash before touching the store; the store may hold a lock
    password_hash = current_app.extensions['epex.passwords'].hash(password)
    user = current_app.extensions['epex.users'].create(email, full_name, password_hash)
    current_app.logger.info(f"[signup] user={user.id}")
    return jsonify(_session_payload('User created successfully', user)), 201


@auth.route('/signin', methods=['POST'])
def signin():
    data = json_body()
    email, password = validate_signin_input(data)

    hasher = current_app.extensions['epex.passwords']
    user = current_app.extensions['epex.users'].find_by_email(email)
    if user is None:
        # Same bcrypt work as the known-user path
        hasher.compare(password, current_app.extensions['epex.dummy_hash'])
        current_app.logger.info("[signin-failed] reason=credentials")
        raise InvalidCredentials()
    if not hasher.compare(password, user.password_hash):
        current_app.logger.info("[signin-failed] reason=credentials")
        raise InvalidCredentials()

    current_app.logger.info(f"[signin] user={user.id}")
    return jsonify(_session_payload('Login successful', user)), 200


@auth.route('/logout', methods=['POST'])
def logout():
    # Tokens are stateless; the client drops its copy
    return jsonify({'success': True, 'message': 'Logged out successfully'})
