"""Bearer-token auth gate.

Flask-Login drives the protected views: its request loader reads the
`Authorization` header and yields an `AuthenticatedUser` built from the
token claims. A missing header and a bad token end in the same 401.
"""
from flask import current_app
from flask_login import UserMixin

from epex.errors import InvalidToken, Unauthorized

BEARER_SCHEME = 'Bearer'


class AuthenticatedUser(UserMixin):
    def __init__(self, claims):
        self.claims = claims
        self.id = claims.user_id
        self.email = claims.email


def extract_bearer_token(header):
    """Return the token from ``Bearer <token>``; any other shape counts as absent."""
    if not header or not isinstance(header, str):
        return None
    parts = header.split(' ')
    if len(parts) != 2:
        return None
    scheme, token = parts
    if scheme != BEARER_SCHEME or not token:
        return None
    return token


def authenticate(headers, tokens):
    token = extract_bearer_token(headers.get('Authorization'))
    if token is None:
        raise Unauthorized()
    try:
        return tokens.verify(token)
    except InvalidToken:
        raise Unauthorized()


def register_auth_gate(login_manager):
    @login_manager.request_loader
    def load_user_from_request(request):
        try:
            claims = authenticate(request.headers, current_app.extensions['epex.tokens'])
        except Unauthorized:
            return None
        return AuthenticatedUser(claims)

    @login_manager.unauthorized_handler
    def unauthorized():
        raise Unauthorized()
