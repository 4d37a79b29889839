"""Identity store: the single signed-in actor, mirrored to a key-value slot.

PLACEHOLDER AUTH: login and signup accept any non-empty credentials and
fabricate the identity. There is no credential check and this is not a
security boundary. A real deployment should put a credential verifier
behind the same login/signup/logout/restore methods.
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from eventhub.models.user import Identity
from eventhub.services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

IDENTITY_SLOT = "user"
DEMO_USER_ID = "1"
DEMO_USER_NAME = "John Doe"


class IdentityStore:
    """Holds zero or one Identity."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage
        self._current: Optional[Identity] = None

    @property
    def current(self) -> Optional[Identity]:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def login(self, email: str, password: str) -> bool:
        if not (email and password):
            return False
        self._activate(Identity(id=DEMO_USER_ID, name=DEMO_USER_NAME, email=email))
        logger.info("Logged in %s", email)
        return True

    def signup(self, name: str, email: str, password: str) -> bool:
        if not (name and email and password):
            return False
        self._activate(Identity(id=DEMO_USER_ID, name=name, email=email))
        logger.info("Signed up %s (%s)", name, email)
        return True

    def logout(self) -> None:
        # Clear memory first: a failing remove must not leave the actor signed in.
        self._current = None
        self._storage.remove(IDENTITY_SLOT)
        logger.info("Logged out")

    def restore(self) -> Optional[Identity]:
        """Adopt the persisted identity, if any. Called once at startup."""
        raw = self._storage.get(IDENTITY_SLOT)
        if raw is None:
            return None
        try:
            identity = Identity.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError):
            logger.warning("Discarding unreadable identity in slot '%s'", IDENTITY_SLOT)
            self._storage.remove(IDENTITY_SLOT)
            return None
        self._current = identity
        logger.info("Restored session for %s", identity.email)
        return identity

    def _activate(self, identity: Identity) -> None:
        # Persist before switching so a StorageError leaves the old identity active.
        self._storage.set(IDENTITY_SLOT, identity.model_dump_json())
        self._current = identity
