import hashlib
import hmac
import time

import requests

from epex.errors import ConfigurationError, UpstreamFailure


def payment_signature(order_id: str, payment_id: str, key_secret: str) -> str:
    """Hex HMAC-SHA256 of ``"<order_id>|<payment_id>"`` keyed by the gateway secret."""
    message = f"{order_id}|{payment_id}".encode('utf-8')
    return hmac.new(key_secret.encode('utf-8'), message, hashlib.sha256).hexdigest()


def verify_payment_signature(order_id: str, payment_id: str, signature: str, key_secret: str) -> bool:
    if not key_secret:
        raise ConfigurationError('Razorpay credentials are not configured')
    expected = payment_signature(order_id, payment_id, key_secret)
    return hmac.compare_digest(expected.encode('utf-8'), str(signature).encode('utf-8'))


def make_receipt() -> str:
    return f"receipt_{int(time.time() * 1000)}"


class RazorpayGateway:
    """Thin client for the gateway's Orders API, spoken over plain HTTPS."""

    def __init__(self, key_id, key_secret, api_base='https://api.razorpay.com/v1', timeout=15):
        if not key_id or not key_secret:
            raise ConfigurationError('Razorpay credentials are not configured')
        self.key_id = key_id
        self.key_secret = key_secret
        self.api_base = api_base.rstrip('/')
        self.timeout = timeout

    def create_order(self, amount: int, currency: str, receipt: str) -> dict:
        try:
            response = requests.post(
                f"{self.api_base}/orders",
                auth=(self.key_id, self.key_secret),
                json={'amount': amount, 'currency': currency, 'receipt': receipt},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamFailure(f"Failed to contact Razorpay: {exc}")

        if response.status_code >= 400:
            description = None
            try:
                description = (response.json().get('error') or {}).get('description')
            except (ValueError, AttributeError):
                pass
            raise UpstreamFailure(description or f"Razorpay rejected the order (HTTP {response.status_code})")

        try:
            payload = response.json()
        except ValueError:
            raise UpstreamFailure('Invalid response received from Razorpay.')
        if not isinstance(payload, dict) or not payload.get('id'):
            raise UpstreamFailure('Unexpected response format from Razorpay.')

        return {
            'id': payload['id'],
            'amount': payload.get('amount', amount),
            'currency': payload.get('currency', currency),
            'receipt': payload.get('receipt', receipt),
        }
