"""API key resolution and the key-presence flag."""

import logging
import os
from typing import Dict, Optional

from clearwrite.errors import MissingAPIKeyError

logger = logging.getLogger(__name__)

ENV_VAR = "GEMINI_API_KEY"
SESSION_KEY = "gemini_api_key"


class SessionStore:
    """In-memory key/value store that lives as long as the process."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class APIKeyManager:
    """Resolves the Gemini API key and keeps ``state.has_api_key`` in sync.

    The environment variable always wins over the session entry. Keys are
    never validated, rotated or expired; only their presence is tracked.
    Passing ``session=None`` models an environment without session storage,
    where saving and clearing are no-ops.
    """

    def __init__(self, state, session: Optional[SessionStore] = None, env_var: str = ENV_VAR):
        self.state = state
        self.session = session
        self.env_var = env_var

    def env_key(self) -> Optional[str]:
        value = os.getenv(self.env_var)
        return value if value else None

    def session_key(self) -> Optional[str]:
        if self.session is None:
            return None
        return self.session.get_item(SESSION_KEY)

    def resolve_api_key(self) -> Optional[str]:
        return self.env_key() or self.session_key() or None

    def require_api_key(self) -> str:
        api_key = self.resolve_api_key()
        if not api_key:
            raise MissingAPIKeyError(self.env_var)
        return api_key

    def initialize_api_key_state(self) -> bool:
        present = bool(self.resolve_api_key())
        self.state.has_api_key.set(present)
        return present

    def save_api_key(self, key: str) -> None:
        if self.session is None or not key or not key.strip():
            return
        self.session.set_item(SESSION_KEY, key.strip())
        self.state.has_api_key.set(True)
        logger.debug("API key saved to session store")

    def clear_api_key(self) -> None:
        if self.session is None:
            return
        self.session.remove_item(SESSION_KEY)
        # An environment key keeps the flag up
        self.state.has_api_key.set(self.env_key() is not None)
        logger.debug("API key removed from session store")
