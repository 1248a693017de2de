from dataclasses import dataclass
from typing import Optional

from epex.errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Secrets and tunables read once from the Flask config at startup."""

    jwt_secret: str
    jwt_expires_in: int
    razorpay_key_id: Optional[str]
    razorpay_key_secret: Optional[str]
    razorpay_api_base: str
    razorpay_timeout: int
    user_store: str

    @property
    def payments_configured(self) -> bool:
        return bool(self.razorpay_key_id and self.razorpay_key_secret)


def load_settings(config) -> Settings:
    jwt_secret = (config.get('JWT_SECRET') or '').strip()
    if not jwt_secret:
        raise ConfigurationError('JWT_SECRET is not configured')

    user_store = (config.get('USER_STORE') or 'sql').strip().lower()
    if user_store not in ('sql', 'memory'):
        raise ConfigurationError(f'Unknown USER_STORE {user_store!r}')

    try:
        expires_in = int(config.get('JWT_EXPIRES_IN_SEC', 7 * 24 * 60 * 60))
        timeout = int(config.get('RAZORPAY_TIMEOUT_SEC', 15))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f'Invalid numeric setting: {exc}')
    if expires_in <= 0:
        raise ConfigurationError('JWT_EXPIRES_IN_SEC must be positive')

    return Settings(
        jwt_secret=jwt_secret,
        jwt_expires_in=expires_in,
        razorpay_key_id=(config.get('RAZORPAY_KEY_ID') or '').strip() or None,
        razorpay_key_secret=(config.get('RAZORPAY_KEY_SECRET') or '').strip() or None,
        razorpay_api_base=(config.get('RAZORPAY_API_BASE') or 'https://api.razorpay.com/v1').rstrip('/'),
        razorpay_timeout=timeout,
        user_store=user_store,
    )
