"""HTTP client for the WebEpex API.

Keeps the client-side session: the bearer token (through a
`TokenStorage`) and the last profile the server returned.
"""
from typing import Any, Dict, Optional

import requests

from epex.storage import NullTokenStorage, TokenStorage


class ApiClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    def __init__(self, base_url: str = '', storage: Optional[TokenStorage] = None,
                 session=None, timeout: float = 15):
        self.base_url = base_url.rstrip('/')
        self.storage = storage or NullTokenStorage()
        self.session = session or requests.Session()
        self.timeout = timeout
        self.user: Optional[Dict[str, Any]] = None

    @property
    def token(self) -> Optional[str]:
        return self.storage.get_token()

    @property
    def is_authenticated(self) -> bool:
        return self.storage.has_token()

    def _request(self, method: str, endpoint: str, json: Optional[dict] = None) -> Dict[str, Any]:
        headers = {'Content-Type': 'application/json'}
        token = self.storage.get_token()
        if token:
            headers['Authorization'] = f"Bearer {token}"
        try:
            response = self.session.request(
                method, f"{self.base_url}{endpoint}", json=json, headers=headers, timeout=self.timeout
            )
        except requests.RequestException:
            raise ApiClientError('Network error occurred')

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}
        if response.status_code >= 400:
            raise ApiClientError(data.get('message') or 'An error occurred', response.status_code)
        return data

    def _start_session(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get('token'):
            self.storage.set_token(data['token'])
        self.user = data.get('user')
        return data

    def _clear_session(self) -> None:
        self.storage.clear_token()
        self.user = None

    def signup(self, email: str, full_name: str, password: str) -> Dict[str, Any]:
        data = self._request('POST', '/api/auth/signup', {
            'email': email, 'fullName': full_name, 'password': password,
        })
        return self._start_session(data)

    def signin(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request('POST', '/api/auth/signin', {'email': email, 'password': password})
        return self._start_session(data)

    def logout(self) -> None:
        try:
            self._request('POST', '/api/auth/logout')
        except ApiClientError:
            # Signing out locally must not depend on the server
            pass
        finally:
            self._clear_session()

    def current_user(self) -> Dict[str, Any]:
        try:
            data = self._request('GET', '/api/user/me')
        except ApiClientError as exc:
            if exc.status_code == 401:
                self._clear_session()
            raise
        self.user = data.get('user')
        return self.user

    def update_status(self, is_vip: Optional[bool] = None, is_premium: Optional[bool] = None) -> Dict[str, Any]:
        body = {}
        if is_vip is not None:
            body['isVip'] = is_vip
        if is_premium is not None:
            body['isPremium'] = is_premium
        data = self._request('PUT', '/api/user/vip', body)
        self.user = data.get('user')
        return self.user

    def game_types(self):
        return self._request('GET', '/api/game/types').get('data', [])

    def create_order(self, amount: int, currency: str = 'INR') -> Dict[str, Any]:
        return self._request('POST', '/api/payments/create-order', {
            'amount': amount, 'currency': currency,
        })['order']

    def verify_payment(self, order_id: str, payment_id: str, signature: str) -> Dict[str, Any]:
        return self._request('POST', '/api/payments/verify', {
            'razorpay_order_id': order_id,
            'razorpay_payment_id': payment_id,
            'razorpay_signature': signature,
        })
