"""User directory: create, list, update and delete user accounts."""

import logging
import math
from dataclasses import dataclass

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accounts.exceptions import DuplicateEmail, UserNotFound
from accounts.models.user import User, normalize_email
from accounts.services.passwords import hash_password

logger = logging.getLogger(__name__)


@dataclass
class UserPage:
    """One page of users plus pagination totals."""

    data: list[User]
    total: int
    total_pages: int
    current_page: int
    limit: int


class UserDirectory:
    """CRUD over user records."""

    def __init__(self, db: Session):
        self.db = db

    def _email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        query = self.db.query(User.id).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    def _commit(self) -> None:
        # The unique index still guards against a concurrent insert of the same email
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEmail() from e

    def create(self, name: str, email: str, password: str, is_superuser: bool = False) -> User:
        """Create a user. Inputs are expected to be validated and normalized already."""
        email = normalize_email(email)
        if self._email_taken(email):
            raise DuplicateEmail()

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            is_superuser=is_superuser,
        )
        self.db.add(user)
        self._commit()
        self.db.refresh(user)

        logger.info(f"Created user {user.id} (superuser={user.is_superuser})")
        return user

    def list_users(self, page: int = 1, limit: int = 10) -> UserPage:
        """Return one page of users ordered by id."""
        offset = (page - 1) * limit
        users = self.db.query(User).order_by(User.id).offset(offset).limit(limit).all()
        total = self.db.query(func.count(User.id)).scalar() or 0

        return UserPage(
            data=users,
            total=total,
            total_pages=math.ceil(total / limit),
            current_page=page,
            limit=limit,
        )

    def get(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise UserNotFound()
        return user

    def update(self, user_id: int, name: str | None = None, email: str | None = None) -> User:
        """Partially update a user's name and/or email."""
        user = self.get(user_id)

        if name is not None:
            user.name = name
        if email is not None:
            email = normalize_email(email)
            if self._email_taken(email, exclude_id=user.id):
                raise DuplicateEmail()
            user.email = email

        self._commit()
        logger.info(f"Updated user {user.id}")
        return user

    def delete(self, user_id: int) -> None:
        """Delete a user together with all of their refresh tokens."""
        user = self.get(user_id)
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")
