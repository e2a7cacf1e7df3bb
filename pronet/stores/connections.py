"""Network store: suggestions, connections and connection requests."""

import logging
from typing import List, Optional

from ..analytics import NetworkAnalytics
from ..models import Connection, ConnectionRequest, ConnectionStatus, User
from ..text_utils import contains_ci
from .base import MutationKind, ObservableStore

logger = logging.getLogger(__name__)


class ConnectionStore(ObservableStore[User]):
    """
    Members the session user may connect with.

    ``results`` holds suggested members. Established connections, incoming
    requests and sent requests are kept in their own lists.
    """

    name = "connections"

    def __init__(self, session, generator, events=None, delay: float = 0.0):
        super().__init__(session, generator, events=events, delay=delay)
        self.connections: List[User] = generator.generate_connections()
        self.pending_requests: List[ConnectionRequest] = []
        self.sent_requests: List[Connection] = []
        if session.current_user is not None:
            self.pending_requests = generator.generate_pending_requests(session.current_user)

        self._suggestions: List[User] = generator.generate_users()
        self.results = list(self._suggestions)
        self.has_more = False
        self.cache_entities(self.results)
        self.cache_entities(self.connections)
        self.analytics = self.compute_analytics()

    def compute_analytics(self) -> NetworkAnalytics:
        return NetworkAnalytics(
            suggestions=len(self.results),
            connections=len(self.connections),
            pending_requests=len(self.pending_requests),
            sent_requests=len(self.sent_requests),
        )

    def mutation_handlers(self):
        return {
            MutationKind.CONNECT: self.send_connection_request,
            MutationKind.ACCEPT: self.accept_connection_request,
            MutationKind.DECLINE: self.decline_connection_request,
            MutationKind.REMOVE: self.remove_connection,
            MutationKind.WITHDRAW: self.withdraw_connection_request,
        }

    async def fetch_users(self) -> bool:
        """Reload the suggestion list, minus members already requested."""
        if self.is_loading:
            return False
        generation = self._begin_loading()
        await self._simulate_latency()
        if self._is_stale(generation):
            return False

        requested = {c.to_user_id for c in self.sent_requests}
        self.results = [user for user in self._suggestions if user.id not in requested]
        self._finish_loading()
        return True

    def search_users(self, query: str) -> List[User]:
        """
        Narrow the suggestions by name, headline or bio.

        An empty query restores the full suggestion list.
        """
        requested = {c.to_user_id for c in self.sent_requests}
        candidates = [user for user in self._suggestions if user.id not in requested]
        if query:
            candidates = [
                user for user in candidates
                if contains_ci(user.full_name, query)
                or contains_ci(user.headline, query)
                or contains_ci(user.bio, query)
            ]
        self.results = candidates
        self.commit()
        return candidates

    def send_connection_request(self, user_id: str, message: Optional[str] = None) -> bool:
        current_id = self._current_user_id()
        user = self.get_by_id(user_id)
        if current_id is None or user is None:
            return False
        if any(c.to_user_id == user_id for c in self.sent_requests):
            return False
        if any(connected.id == user_id for connected in self.connections):
            return False

        connection = Connection(
            id=self.generator.new_id(),
            from_user_id=current_id,
            to_user_id=user.id,
            request_message=message,
            created_at=self.generator.now(),
            updated_at=self.generator.now(),
        )
        self.sent_requests.append(connection)
        self.results = [u for u in self.results if u.id != user_id]
        logger.info(f"Sent connection request to {user.full_name}")
        self.commit()
        return True

    def accept_connection_request(self, request_id: str) -> bool:
        request = self._find_request(request_id)
        if request is None:
            return False
        request.connection.status = ConnectionStatus.ACCEPTED
        request.connection.accepted_at = self.generator.now()
        request.connection.updated_at = self.generator.now()
        self.connections.append(request.from_user)
        self.cache[request.from_user.id] = request.from_user
        self.pending_requests = [r for r in self.pending_requests if r.id != request_id]
        logger.info(f"Accepted connection request from {request.from_user.full_name}")
        self.commit()
        return True

    def decline_connection_request(self, request_id: str) -> bool:
        request = self._find_request(request_id)
        if request is None:
            return False
        request.connection.status = ConnectionStatus.DECLINED
        request.connection.updated_at = self.generator.now()
        self.pending_requests = [r for r in self.pending_requests if r.id != request_id]
        self.commit()
        return True

    def remove_connection(self, user_id: str) -> bool:
        if not any(user.id == user_id for user in self.connections):
            return False
        self.connections = [user for user in self.connections if user.id != user_id]
        self.commit()
        return True

    def withdraw_connection_request(self, connection_id: str) -> bool:
        connection = next((c for c in self.sent_requests if c.id == connection_id), None)
        if connection is None:
            return False
        connection.status = ConnectionStatus.WITHDRAWN
        self.sent_requests = [c for c in self.sent_requests if c.id != connection_id]
        self.commit()
        return True

    def connection_status(self, user_id: str) -> Optional[ConnectionStatus]:
        """Relationship between the session user and ``user_id``, if any."""
        if self._current_user_id() is None:
            return None
        if any(user.id == user_id for user in self.connections):
            return ConnectionStatus.ACCEPTED
        if any(c.to_user_id == user_id for c in self.sent_requests):
            return ConnectionStatus.PENDING
        if any(r.from_user.id == user_id for r in self.pending_requests):
            return ConnectionStatus.PENDING
        return None

    def _find_request(self, request_id: str) -> Optional[ConnectionRequest]:
        return next((r for r in self.pending_requests if r.id == request_id), None)
