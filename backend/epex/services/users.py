import threading
import uuid
from typing import Dict, Optional

from sqlalchemy.exc import IntegrityError

from epex import db
from epex.errors import DuplicateEmail, NotFound
from epex.models import User, UserRecord, normalize_email, utcnow


class UserRepository:
    """Credential store interface.

    Emails are matched after `normalize_email`; records are never removed.
    Implementations must let at most one `create` succeed per normalized
    email, even when called concurrently.
    """

    def create(self, email: str, full_name: str, password_hash: str) -> UserRecord:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        raise NotImplementedError

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        raise NotImplementedError

    def update_status(self, user_id: str, is_vip: Optional[bool] = None,
                      is_premium: Optional[bool] = None) -> UserRecord:
        raise NotImplementedError


class InMemoryUserRepository(UserRepository):
    """Process-local store. Contents vanish with the process."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: Dict[str, UserRecord] = {}
        self._id_by_email: Dict[str, str] = {}

    def create(self, email, full_name, password_hash):
        normalized = normalize_email(email)
        with self._lock:
            if normalized in self._id_by_email:
                raise DuplicateEmail()
            record = UserRecord(
                id=str(uuid.uuid4()),
                email=normalized,
                full_name=full_name.strip(),
                password_hash=password_hash,
                created_at=utcnow(),
            )
            self._by_id[record.id] = record
            self._id_by_email[normalized] = record.id
        return record

    def find_by_email(self, email):
        with self._lock:
            user_id = self._id_by_email.get(normalize_email(email))
            return self._by_id.get(user_id) if user_id else None

    def find_by_id(self, user_id):
        with self._lock:
            return self._by_id.get(user_id)

    def update_status(self, user_id, is_vip=None, is_premium=None):
        with self._lock:
            record = self._by_id.get(user_id)
            if record is None:
                raise NotFound('User not found')
            record = record.with_status(is_vip=is_vip, is_premium=is_premium)
            self._by_id[user_id] = record
        return record

    def __len__(self):
        with self._lock:
            return len(self._by_id)


class SqlUserRepository(UserRepository):
    """Store backed by the `user` table; the unique email index settles races."""

    def create(self, email, full_name, password_hash):
        normalized = normalize_email(email)
        if User.query.filter_by(email=normalized).first():
            raise DuplicateEmail()
        user = User(
            id=str(uuid.uuid4()),
            email=normalized,
            full_name=full_name.strip(),
            password_hash=password_hash,
            is_premium=False,
            is_vip=False,
            created_at=utcnow(),
        )
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise DuplicateEmail()
        return user.to_record()

    def find_by_email(self, email):
        user = User.query.filter_by(email=normalize_email(email)).first()
        return user.to_record() if user else None

    def find_by_id(self, user_id):
        user = db.session.get(User, user_id)
        return user.to_record() if user else None

    def update_status(self, user_id, is_vip=None, is_premium=None):
        user = db.session.get(User, user_id)
        if user is None:
            raise NotFound('User not found')
        if is_vip is not None:
            user.is_vip = is_vip
        if is_premium is not None:
            user.is_premium = is_premium
        db.session.add(user)
        db.session.commit()
        return user.to_record()


def build_user_repository(store: str) -> UserRepository:
    if store == 'memory':
        return InMemoryUserRepository()
    return SqlUserRepository()
