# server/core/tokens.py

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt


ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE = timedelta(days=7)


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    username: str


class TokenService:
    """
    Issues and verifies signed, self-contained bearer tokens.
    The secret is injected at construction; nothing here reads the environment.
    """

    def __init__(self, secret: str, algorithm: str = ALGORITHM, expires_in: timedelta = ACCESS_TOKEN_EXPIRE):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        to_encode = {
            "userId": user.id,
            "username": user.username,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims | None:
        """
        Returns the embedded identity, or None for a bad signature,
        malformed payload or expired token.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError:
            return None
        user_id = payload.get("userId")
        username = payload.get("username")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(username, str):
            return None
        return TokenClaims(user_id=user_id, username=username)
