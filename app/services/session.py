# app/services/session.py

import logging
from collections.abc import MutableMapping

from app.services import api


logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"
USER_QUERY = "/api/user"


class ClientSession:
    """
    Browser-side auth state.

    `store` is the persisted cookie jar (a mapping with `save()`), holding the bearer token.
    `cache` is the in-memory query cache, holding the current user under USER_QUERY.

    The session starts on a successful login/registration and ends on logout
    or when the server rejects the token.
    """

    def __init__(self, store: MutableMapping, cache: MutableMapping):
        self.store = store
        self.cache = cache

    @property
    def token(self):
        return self.store.get(TOKEN_KEY) or None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def start(self, auth: dict):
        self.store[TOKEN_KEY] = auth["token"]
        self.store.save()
        self.cache[USER_QUERY] = auth["user"]

    def end(self):
        if TOKEN_KEY in self.store:
            del self.store[TOKEN_KEY]
            self.store.save()
        self.cache.pop(USER_QUERY, None)

    def current_user(self, fetch=None):
        """
        Returns the cached user, fetching it once per session.
        Without a token no request is made.
        """
        token = self.token
        if token is None:
            return None
        if self.cache.get(USER_QUERY):
            return self.cache[USER_QUERY]

        result = (fetch or api.get_user_info)(token)
        if isinstance(result, dict) and result.get("error"):
            if result.get("status") in (401, 403):
                logger.info("Stored token rejected (%s); ending session", result["status"])
                self.end()
            return None

        self.cache[USER_QUERY] = result
        return result

    def login(self, username, password, call=None) -> dict:
        result = (call or api.login_user)(username, password)
        if not result.get("error"):
            self.start(result)
        return result

    def register(self, username, password, call=None) -> dict:
        result = (call or api.register_user)(username, password)
        if not result.get("error"):
            self.start(result)
        return result

    def logout(self, call=None):
        """
        Logout is local: the token is dropped even if the server call fails.
        """
        token = self.token
        try:
            (call or api.logout_user)(token)
        except Exception as e:
            logger.warning("Server logout failed, clearing local session anyway: %s", e)
        finally:
            self.end()
