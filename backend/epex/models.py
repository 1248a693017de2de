from dataclasses import dataclass, replace
from datetime import datetime, timezone

from epex import db


def utcnow():
    return datetime.now(timezone.utc)


def normalize_email(email):
    return (email or '').strip().lower()


@dataclass(frozen=True)
class UserRecord:
    """A user as handed out by the credential store."""

    id: str
    email: str
    full_name: str
    password_hash: str
    is_premium: bool = False
    is_vip: bool = False
    created_at: datetime = None

    def with_status(self, is_vip=None, is_premium=None):
        changes = {}
        if is_vip is not None:
            changes['is_vip'] = is_vip
        if is_premium is not None:
            changes['is_premium'] = is_premium
        return replace(self, **changes)

    def to_dict(self):
        # Public profile: the password hash never leaves the store
        return {
            'id': self.id,
            'email': self.email,
            'fullName': self.full_name,
            'isPremium': bool(self.is_premium),
            'isVip': bool(self.is_vip),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }


class User(db.Model):
    __tablename__ = 'user'
    id = db.Column(db.String(36), primary_key=True)
    email = db.Column(db.String(254), unique=True, nullable=False, index=True)
    full_name = db.Column(db.String(128), nullable=False)
    password_hash = db.Column(db.String(128), nullable=False)
    is_premium = db.Column(db.Boolean, default=False, nullable=False)
    is_vip = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    def to_record(self):
        return UserRecord(
            id=self.id,
            email=self.email,
            full_name=self.full_name,
            password_hash=self.password_hash,
            is_premium=bool(self.is_premium),
            is_vip=bool(self.is_vip),
            created_at=self.created_at,
        )
