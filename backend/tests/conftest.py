import os
import sys
import pytest

# Ensure the backend root (containing the `epex` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from epex import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET = 'test-jwt-secret'
    JWT_EXPIRES_IN_SEC = 3600
    RAZORPAY_KEY_ID = 'rzp_test_key'
    RAZORPAY_KEY_SECRET = 'rzp_test_secret'
    RAZORPAY_API_BASE = 'https://api.razorpay.test/v1'
    RAZORPAY_TIMEOUT_SEC = 5
    USER_STORE = 'sql'
    # Cheapest cost bcrypt accepts; keeps the suite fast
    BCRYPT_LOG_ROUNDS = 4
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    CORS_ORIGINS = []


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import epex.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def signup(client):
    """Register a user and return (token, user) from the response."""
    def _signup(email='jo@example.com', full_name='Jo Doe', password='secret1'):
        res = client.post('/api/auth/signup', json={
            'email': email, 'fullName': full_name, 'password': password,
        })
        assert res.status_code == 201, res.get_json()
        body = res.get_json()
        return body['token'], body['user']
    return _signup


def bearer(token):
    return {'Authorization': f'Bearer {token}'}
