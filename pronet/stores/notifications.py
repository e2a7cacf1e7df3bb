"""Notification store."""

import logging
from collections import Counter
from typing import Optional

from ..analytics import NotificationAnalytics
from ..models import Notification, NotificationType
from .base import MutationKind, ObservableStore

logger = logging.getLogger(__name__)

NOTIFICATION = "notification"


class NotificationStore(ObservableStore[Notification]):
    """Notifications for the session user, newest first."""

    name = "notifications"

    def __init__(self, session, generator, events=None, delay: float = 0.0):
        super().__init__(session, generator, events=events, delay=delay)
        self.results = self._fixtures()
        self.has_more = False
        self.cache_entities(self.results)
        self.analytics = self.compute_analytics()

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self.results if not n.is_read)

    def compute_analytics(self) -> NotificationAnalytics:
        return NotificationAnalytics(
            total=len(self.results),
            unread=self.unread_count,
            by_type=dict(Counter(n.type.value for n in self.results)),
        )

    def mutation_handlers(self):
        return {
            MutationKind.MARK_READ: self.mark_as_read,
            MutationKind.DELETE: self.delete_notification,
        }

    def _fixtures(self):
        return self.generator.generate_notifications(self._current_user_id() or "current_user")

    async def fetch_notifications(self) -> bool:
        if self.is_loading:
            return False
        generation = self._begin_loading()
        await self._simulate_latency()
        if self._is_stale(generation):
            return False
        self.results = self._fixtures()
        self.cache_entities(self.results)
        self._finish_loading()
        return True

    def mark_as_read(self, notification_id: str) -> bool:
        notification = self.get_by_id(notification_id)
        if notification is None or notification.is_read:
            return False
        notification.is_read = True
        notification.updated_at = self.generator.now()
        self.commit()
        return True

    def mark_all_as_read(self) -> int:
        """Mark every unread notification read. Returns how many changed."""
        changed = 0
        for notification in self.results:
            if not notification.is_read:
                notification.is_read = True
                notification.updated_at = self.generator.now()
                changed += 1
        if changed:
            self.commit()
        return changed

    def delete_notification(self, notification_id: str) -> bool:
        if self.get_by_id(notification_id) is None:
            return False
        self.results = [n for n in self.results if n.id != notification_id]
        self.cache.pop(notification_id, None)
        self.commit()
        return True

    def create_notification(
        self,
        user_id: str,
        type: NotificationType,
        title: str,
        message: str,
        from_user_id: Optional[str] = None,
        from_user_name: Optional[str] = None,
        post_id: Optional[str] = None,
        connection_request_id: Optional[str] = None,
    ) -> Optional[Notification]:
        """
        Record a notification.

        Only notifications addressed to the session user are kept.

        Returns:
            The stored notification, or None if it was not for this user.
        """
        if user_id != self._current_user_id():
            logger.debug(f"Dropping {type.value} notification for {user_id}")
            return None

        notification = Notification(
            id=self.generator.new_id(),
            user_id=user_id,
            type=NotificationType(type),
            title=title,
            message=message,
            from_user_id=from_user_id,
            from_user_name=from_user_name,
            post_id=post_id,
            connection_request_id=connection_request_id,
            created_at=self.generator.now(),
            updated_at=self.generator.now(),
        )
        self._insert(notification)
        return notification

    def _insert(self, notification: Notification) -> None:
        self.results.insert(0, notification)
        self.cache[notification.id] = notification
        self.commit()
        self.events.emit(NOTIFICATION, notification)

    def notify_like(self, post_id: str, post_author_id: str, from_user_id: str, from_user_name: str):
        if post_author_id == from_user_id:
            return None
        return self.create_notification(
            post_author_id, NotificationType.LIKE, "New Like",
            f"{from_user_name} liked your post",
            from_user_id=from_user_id, from_user_name=from_user_name, post_id=post_id,
        )

    def notify_comment(self, post_id: str, post_author_id: str, from_user_id: str, from_user_name: str):
        if post_author_id == from_user_id:
            return None
        return self.create_notification(
            post_author_id, NotificationType.COMMENT, "New Comment",
            f"{from_user_name} commented on your post",
            from_user_id=from_user_id, from_user_name=from_user_name, post_id=post_id,
        )

    def notify_connection_request(self, to_user_id: str, from_user_id: str, from_user_name: str,
                                  connection_id: str):
        return self.create_notification(
            to_user_id, NotificationType.CONNECTION_REQUEST, "Connection Request",
            f"{from_user_name} wants to connect with you",
            from_user_id=from_user_id, from_user_name=from_user_name,
            connection_request_id=connection_id,
        )

    def notify_connection_accepted(self, to_user_id: str, from_user_id: str, from_user_name: str):
        return self.create_notification(
            to_user_id, NotificationType.CONNECTION_ACCEPTED, "Connection Accepted",
            f"{from_user_name} accepted your connection request",
            from_user_id=from_user_id, from_user_name=from_user_name,
        )

    def notify_message(self, to_user_id: str, from_user_id: str, from_user_name: str):
        if to_user_id == from_user_id:
            return None
        return self.create_notification(
            to_user_id, NotificationType.MESSAGE, "New Message",
            f"{from_user_name} sent you a message",
            from_user_id=from_user_id, from_user_name=from_user_name,
        )

    def notify_mention(self, user_id: str, post_id: str, from_user_id: str, from_user_name: str):
        if user_id == from_user_id:
            return None
        return self.create_notification(
            user_id, NotificationType.MENTION, "You were mentioned",
            f"{from_user_name} mentioned you in a post",
            from_user_id=from_user_id, from_user_name=from_user_name, post_id=post_id,
        )

    def simulate_new_notification(self) -> Optional[Notification]:
        """Coin-flip a random activity notification, as a live feed would deliver."""
        if self.generator.rng.random() < 0.5:
            return None
        notification = self.generator.random_notification(self._current_user_id() or "")
        self._insert(notification)
        return notification
