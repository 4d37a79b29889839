"""Application entry point: the composition root.

Stores are built once here and handed to the page controllers; nothing
looks them up globally.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from eventhub.config import Settings, settings as default_settings
from eventhub.exceptions import StorageError
from eventhub.services.event_store import EventStore
from eventhub.services.identity_store import IdentityStore
from eventhub.services.seed import demo_events
from eventhub.services.storage import InMemoryStorage, JsonFileStorage, KeyValueStorage

logger = logging.getLogger(__name__)


@dataclass
class EventHubApp:
    settings: Settings
    storage: KeyValueStorage
    events: EventStore
    identity: IdentityStore


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_storage(config: Settings) -> KeyValueStorage:
    if config.STORAGE_BACKEND == "memory":
        return InMemoryStorage()
    if config.STORAGE_BACKEND == "file":
        return JsonFileStorage(config.STORAGE_PATH)
    raise ValueError(f"Unknown STORAGE_BACKEND {config.STORAGE_BACKEND!r} (expected 'file' or 'memory')")


def create_app(config: Optional[Settings] = None, storage: Optional[KeyValueStorage] = None) -> EventHubApp:
    """Wire storage and both stores, then restore any persisted identity."""
    config = config or default_settings
    configure_logging(config.LOG_LEVEL)
    if storage is None:
        storage = build_storage(config)

    events = EventStore(seed=demo_events() if config.SEED_DEMO_EVENTS else None)
    identity = IdentityStore(storage)
    try:
        identity.restore()
    except StorageError:
        logger.exception("Could not read the saved session; starting signed out")

    logger.info("EventHub ready: %d events, signed in: %s",
                len(events.list_events()), identity.is_authenticated)
    return EventHubApp(settings=config, storage=storage, events=events, identity=identity)
