# taskboard/repositories/user_repository.py

import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.models.user import User


logger = logging.getLogger(__name__)


class UserRepository:
    """Credential store: user lookups and uniqueness-checked inserts."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        return self.session.query(User).filter(User.username == username).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).first()

    def exists_by_username(self, username: str) -> bool:
        return self.session.query(
            self.session.query(User).filter(User.username == username).exists()
        ).scalar()

    def exists_by_email(self, email: str) -> bool:
        return self.session.query(
            self.session.query(User).filter(User.email == email).exists()
        ).scalar()

    def insert_if_unique(self, user: User) -> bool:
        """
        Adds ``user`` unless another row already holds its username or email.
        Returns False instead of raising when the unique indexes reject the row.
        """
        clash = (
            self.session.query(User)
            .filter(or_(User.username == user.username, User.email == user.email))
            .first()
        )
        if clash is not None:
            return False

        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning("Concurrent insert rejected for username %s", user.username)
            return False
        return True
