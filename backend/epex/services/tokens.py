from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from epex.errors import ConfigurationError, InvalidToken


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    email: str
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class TokenService:
    """Issues and verifies HS256 JWTs carrying the user id and email."""

    algorithm = 'HS256'

    def __init__(self, secret: str, expires_in: int = 7 * 24 * 60 * 60):
        if not secret:
            raise ConfigurationError('JWT_SECRET is not configured')
        self._secret = secret
        self.expires_in = timedelta(seconds=expires_in)

    def issue(self, user_id: str, email: str, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            'sub': user_id,
            'email': email,
            'iat': now,
            'exp': now + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        if not token or not isinstance(token, str):
            raise InvalidToken('Invalid token')
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[self.algorithm],
                options={'require': ['sub', 'exp', 'iat']},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken('Token has expired')
        except jwt.InvalidTokenError:
            raise InvalidToken('Invalid token')

        user_id = payload.get('sub')
        email = payload.get('email')
        if not isinstance(user_id, str) or not isinstance(email, str):
            raise InvalidToken('Invalid token')
        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(payload['iat'], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload['exp'], tz=timezone.utc),
        )
