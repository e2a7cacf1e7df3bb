"""Base class for the observable collection stores."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from ..errors import NotFoundError
from ..events import EventEmitter
from ..generator import DemoDataGenerator
from ..session import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHANGED = "changed"


class MutationKind(str, Enum):
    """User actions a store can apply to one of its entities."""

    APPLY = "apply"
    WITHDRAW = "withdraw"
    SAVE = "save"
    UNSAVE = "unsave"
    DEACTIVATE = "deactivate"
    UPDATE = "update"
    ADVANCE = "advance"
    LIKE = "like"
    COMMENT = "comment"
    LIKE_COMMENT = "like_comment"
    REPLY = "reply"
    SHARE = "share"
    EDIT = "edit"
    DELETE = "delete"
    REPORT = "report"
    CONNECT = "connect"
    ACCEPT = "accept"
    DECLINE = "decline"
    REMOVE = "remove"
    MARK_READ = "mark_read"


@dataclass(frozen=True)
class StoreState(Generic[T]):
    """What a store publishes to its subscribers on every change."""

    results: Tuple[T, ...]
    analytics: Any
    is_loading: bool
    has_more: bool


class ObservableStore(ABC, Generic[T]):
    """
    Owns one domain's visible slice of entities.

    Every change goes through ``commit()``, which recomputes the analytics
    snapshot and publishes a ``StoreState`` on the ``"changed"`` event.
    """

    name: str = "store"

    def __init__(
        self,
        session: Session,
        generator: DemoDataGenerator,
        events: Optional[EventEmitter] = None,
        delay: float = 0.0,
    ):
        """
        Initialize the store.

        Args:
            session: Session holding the signed-in user.
            generator: Source of demo data.
            events: Emitter to publish on. A private one is created when omitted.
            delay: Simulated latency in seconds for async operations.
        """
        self.session = session
        self.generator = generator
        self.events = events or EventEmitter()
        self.delay = delay
        self.results: List[T] = []
        self.cache: Dict[str, T] = {}
        self.is_loading = False
        self.has_more = True
        self.analytics = None
        self._generation = 0

    # Publishing

    @abstractmethod
    def compute_analytics(self) -> Any:
        """Derive the analytics snapshot from the current state."""

    def state(self) -> StoreState[T]:
        return StoreState(
            results=tuple(self.results),
            analytics=self.analytics,
            is_loading=self.is_loading,
            has_more=self.has_more,
        )

    def publish(self) -> None:
        self.events.emit(CHANGED, self.state())

    def commit(self) -> None:
        """Recompute analytics and publish the new state."""
        self.analytics = self.compute_analytics()
        self.publish()

    def subscribe(self, handler: Callable[[StoreState[T]], None]) -> Callable[[], None]:
        return self.events.subscribe(CHANGED, handler)

    # Lookup

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Find an entity in the visible slice, falling back to the cache."""
        for entity in self.results:
            if getattr(entity, "id", None) == entity_id:
                return entity
        return self.cache.get(entity_id)

    def require(self, entity_id: str) -> T:
        """Like ``get_by_id`` but raises NotFoundError for unknown ids."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.name, entity_id)
        return entity

    def cache_entities(self, entities: Iterable[T]) -> None:
        for entity in entities:
            self.cache[entity.id] = entity

    # Mutations

    def mutation_handlers(self) -> Dict[MutationKind, Callable[..., bool]]:
        """Map each supported MutationKind to the method implementing it."""
        return {}

    def mutate(self, entity_id: str, kind: MutationKind, payload: Optional[dict] = None) -> bool:
        """
        Apply a user action to an entity.

        Unknown ids are ignored: nothing changes and False is returned.

        Args:
            entity_id: Id of the entity the action targets.
            kind: The action.
            payload: Keyword arguments for the action.

        Returns:
            True if the store changed.

        Raises:
            ValueError: if this store does not support ``kind``.
        """
        handler = self.mutation_handlers().get(MutationKind(kind))
        if handler is None:
            raise ValueError(f"{self.name} store does not support {MutationKind(kind).value}")
        changed = handler(entity_id, **(payload or {}))
        if not changed:
            logger.debug(f"{self.name}: {MutationKind(kind).value} on {entity_id} was a no-op")
        return changed

    def _current_user_id(self) -> Optional[str]:
        return self.session.user_id

    # Loading

    def _begin_loading(self) -> int:
        """Mark the store busy and return the generation of this operation."""
        self._generation += 1
        self.is_loading = True
        self.publish()
        return self._generation

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(f"{self.name}: discarding stale result (generation {generation})")
            return True
        return False

    def _finish_loading(self) -> None:
        self.is_loading = False
        self.commit()

    async def _simulate_latency(self, delay: Optional[float] = None) -> None:
        delay = self.delay if delay is None else delay
        if delay > 0:
            await asyncio.sleep(delay)
        else:
            await asyncio.sleep(0)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self.results)} {self.name}>"
