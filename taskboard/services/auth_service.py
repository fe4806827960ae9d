# taskboard/services/auth_service.py

import logging
import uuid
from typing import Optional

from taskboard.core.security import PasswordHasher, TokenService
from taskboard.models.user import User
from taskboard.repositories.user_repository import UserRepository
from taskboard.schemas import Result


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."


class AuthService:
    """
    Registration and login. Every path returns a Result carrying a token on success;
    store failures are reported as 500 rather than raised.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.users = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    def register_user(self, username: str, email: str, password: str) -> Result[str]:
        logger.info("Attempting to register a new user with username %s", username)

        if not username or not username.strip():
            logger.warning("Registration failed: username is required.")
            return Result[str].fail("Username is required.")
        if not email or not email.strip():
            logger.warning("Registration failed: email is required.")
            return Result[str].fail("Email is required.")

        try:
            if self.users.exists_by_username(username):
                logger.warning("Registration failed for username %s: username already exists.", username)
                return Result[str].fail("Username already exists.")

            user = User(
                id=str(uuid.uuid4()),
                username=username,
                email=email,
                password_hash=self.password_hasher.hash(password),
            )
            if not self.users.insert_if_unique(user):
                # Username or email was taken between the check and the insert
                logger.warning("Registration failed for username %s: insert was rejected.", username)
                return Result[str].fail("User registration failed.")

            # A miss on read-back is reported, not retried
            stored: Optional[User] = self.users.find_by_username(username)
            if stored is None:
                logger.error("Failed to retrieve user %s after registration.", username)
                return Result[str].fail("User registration failed.")

            token = self.token_service.issue(stored)
        except Exception as e:
            logger.exception("Unexpected error while registering user %s", username)
            return Result[str].fail(f"An error occurred: {e}", code=500)

        logger.info("User %s registered successfully.", stored.username)
        return Result[str].ok(token, "User registered successfully.")

    def authenticate_user(self, identifier: str, password: str) -> Result[str]:
        logger.info("Authentication attempt for identifier %s", identifier)

        try:
            # Anything with an @ is treated as an email, even if it is a username
            if "@" in identifier:
                user = self.users.find_by_email(identifier)
            else:
                user = self.users.find_by_username(identifier)

            if user is None or not self.password_hasher.verify(password, user.password_hash):
                logger.warning("Authentication failed for identifier %s. Invalid credentials.", identifier)
                return Result[str].fail(INVALID_CREDENTIALS)

            token = self.token_service.issue(user)
        except Exception as e:
            logger.exception("Unexpected error while authenticating %s", identifier)
            return Result[str].fail(f"An error occurred: {e}", code=500)

        logger.info("User %s authenticated successfully.", user.username)
        return Result[str].ok(token, "Authenticating...")
