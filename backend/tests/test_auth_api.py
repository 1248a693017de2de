import pytest

from epex.models import User


def test_signup_normalizes_email(client, flask_app):
    res = client.post('/api/auth/signup', json={
        'email': 'A@B.com', 'fullName': 'Jo Doe', 'password': 'secret1',
    })
    assert res.status_code == 201
    body = res.get_json()
    assert body['success'] is True
    assert body['message'] == 'User created successfully'
    assert body['token']
    user = body['user']
    assert user['email'] == 'a@b.com'
    assert user['fullName'] == 'Jo Doe'
    assert user['isVip'] is False
    assert user['isPremium'] is False
    assert user['createdAt']
    assert 'password' not in user and 'passwordHash' not in user
    # Stored row is normalized too, and the password is hashed
    stored = User.query.filter_by(email='a@b.com').first()
    assert stored is not None
    assert stored.password_hash != 'secret1'


@pytest.mark.parametrize('body, message', [
    ({}, 'All fields are required'),
    ({'email': 'jo@example.com', 'fullName': 'Jo Doe'}, 'All fields are required'),
    ({'email': 'not-an-email', 'fullName': 'J', 'password': '1'}, 'Invalid email format'),
    ({'email': 'jo@example.com', 'fullName': ' J ', 'password': '1'}, 'Full name must be at least 2 characters'),
    ({'email': 'jo@example.com', 'fullName': 'Jo', 'password': '12345'}, 'Password must be at least 6 characters'),
])
def test_signup_validation_first_failure_wins(client, body, message):
    res = client.post('/api/auth/signup', json=body)
    assert res.status_code == 400
    assert res.get_json() == {'success': False, 'message': message}


def test_signup_without_json_body(client):
    res = client.post('/api/auth/signup', data='nope', content_type='text/plain')
    assert res.status_code == 400
    assert res.get_json()['message'] == 'All fields are required'


@pytest.mark.parametrize('variant', ['jo@example.com', 'JO@Example.COM', '  jo@example.com  '])
def test_duplicate_signup_rejected_for_any_variant(client, signup, variant):
    signup(email='jo@example.com')
    res = client.post('/api/auth/signup', json={
        'email': variant, 'fullName': 'Other Person', 'password': 'another1',
    })
    assert res.status_code == 400
    assert res.get_json() == {'success': False, 'message': 'User with this email already exists'}


def test_signin_returns_token_accepted_by_gate(client, signup):
    signup(email='jo@example.com', password='secret1')
    res = client.post('/api/auth/signin', json={'email': ' JO@example.com', 'password': 'secret1'})
    assert res.status_code == 200
    body = res.get_json()
    assert body['message'] == 'Login successful'
    assert body['user']['email'] == 'jo@example.com'
    me = client.get('/api/user/me', headers={'Authorization': f"Bearer {body['token']}"})
    assert me.status_code == 200
    assert me.get_json()['user']['id'] == body['user']['id']


def test_signin_unknown_email_and_wrong_password_look_identical(client, signup):
    signup(email='jo@example.com', password='secret1')
    unknown = client.post('/api/auth/signin', json={'email': 'nobody@example.com', 'password': 'secret1'})
    wrong = client.post('/api/auth/signin', json={'email': 'jo@example.com', 'password': 'secret2'})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_json() == wrong.get_json() == {
        'success': False, 'message': 'Invalid email or password',
    }


def test_signin_validation(client):
    res = client.post('/api/auth/signin', json={'email': 'jo@example.com'})
    assert res.status_code == 400
    assert res.get_json()['message'] == 'Email and password are required'
    res = client.post('/api/auth/signin', json={'email': 'jo', 'password': 'x'})
    assert res.status_code == 400
    assert res.get_json()['message'] == 'Invalid email format'


def test_signin_does_not_revalidate_password_length(client, flask_app):
    # Short passwords just fail the comparison
    res = client.post('/api/auth/signin', json={'email': 'jo@example.com', 'password': 'x'})
    assert res.status_code == 401


def test_logout_is_stateless(client):
    res = client.post('/api/auth/logout')
    assert res.status_code == 200
    assert res.get_json() == {'success': True, 'message': 'Logged out successfully'}


def test_unknown_route_uses_envelope(client):
    res = client.get('/api/nope')
    assert res.status_code == 404
    assert res.get_json() == {'success': False, 'message': 'Not found'}
    res = client.get('/api/auth/signup')
    assert res.status_code == 405
    assert res.get_json()['success'] is False


def test_long_password_signup_and_signin(client):
    password = 'p' * 100
    res = client.post('/api/auth/signup', json={
        'email': 'long@example.com', 'fullName': 'Jo Doe', 'password': password,
    })
    assert res.status_code == 201
    res = client.post('/api/auth/signin', json={'email': 'long@example.com', 'password': password})
    assert res.status_code == 200
    # Only the first 72 bytes would count without pre-hashing
    res = client.post('/api/auth/signin', json={'email': 'long@example.com', 'password': 'p' * 99 + 'q'})
    assert res.status_code == 401


@pytest.mark.parametrize('method, url, message', [
    ('post', '/api/auth/signup', 'All fields are required'),
    ('post', '/api/auth/signin', 'Email and password are required'),
    ('post', '/api/payments/create-order', 'Invalid amount. Minimum amount is ₹1 (100 paise)'),
    ('post', '/api/payments/verify', 'Missing payment details'),
])
@pytest.mark.parametrize('body', [[1, 2], 'text', 42])
def test_non_object_json_body_is_rejected(client, method, url, message, body):
    res = getattr(client, method)(url, json=body)
    assert res.status_code == 400
    assert res.get_json() == {'success': False, 'message': message}


def test_unknown_email_compares_against_app_dummy_hash(client, flask_app):
    dummy = flask_app.extensions['epex.dummy_hash']
    # Built with this app's cost factor
    assert dummy.startswith('$2b$04$')
    res = client.post('/api/auth/signin', json={'email': 'nobody@example.com', 'password': 'secret1'})
    assert res.status_code == 401
