# server/core/accounts.py

import logging
from dataclasses import dataclass
from sqlalchemy.exc import IntegrityError

from server.core.security import get_password_hash, verify_password
from server.core.tokens import TokenService
from server.errors import InfrastructureError
from server.models import User
from server.storage import Storage


logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: User
    token: str


class AccountService:
    """
    Login and registration on top of Storage and TokenService.

    Business rejections (unknown user, wrong password, taken username) return None.
    Storage or hashing faults raise InfrastructureError.
    """

    def __init__(self, storage: Storage, tokens: TokenService):
        self.storage = storage
        self.tokens = tokens

    def login(self, username: str, password: str) -> AuthResult | None:
        try:
            user = self.storage.get_user_by_username(username)
            if not user or not verify_password(password, user.password):
                logger.info("Login rejected for username=%r", username)
                return None
            return AuthResult(user=user, token=self.tokens.issue(user))
        except Exception as e:
            raise InfrastructureError("Login failed") from e

    def register(self, username: str, password: str) -> AuthResult | None:
        try:
            if self.storage.get_user_by_username(username):
                logger.info("Registration rejected, username=%r already exists", username)
                return None
            user = self.storage.create_user(username, get_password_hash(password))
        except IntegrityError:
            logger.info("Registration rejected, username=%r already exists", username)
            return None
        except Exception as e:
            raise InfrastructureError("Registration failed") from e

        logger.info("Registered user id=%s username=%r", user.id, user.username)
        return AuthResult(user=user, token=self.tokens.issue(user))
