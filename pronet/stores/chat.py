"""Messaging store: conversations and the open chat room."""

import logging
from typing import List, Optional

from ..analytics import ChatAnalytics
from ..models import Conversation, Message, MessageType
from ..sample_data import INCOMING_MESSAGES
from .base import MutationKind, ObservableStore

logger = logging.getLogger(__name__)

MESSAGE = "message"


class ChatStore(ObservableStore[Message]):
    """``results`` holds the messages of the open room, oldest first."""

    name = "chat"

    def __init__(self, session, generator, events=None, delay: float = 0.0):
        super().__init__(session, generator, events=events, delay=delay)
        self.conversations: List[Conversation] = generator.generate_conversations()
        self.current_chat_room_id: Optional[str] = None
        self.has_more = False
        self.analytics = self.compute_analytics()

    def compute_analytics(self) -> ChatAnalytics:
        return ChatAnalytics(
            conversations=len(self.conversations),
            messages=len(self.results),
            unread_messages=sum(c.unread_count for c in self.conversations),
        )

    def mutation_handlers(self):
        return {MutationKind.MARK_READ: self.mark_message_as_read}

    async def fetch_conversations(self) -> bool:
        if self.is_loading:
            return False
        generation = self._begin_loading()
        await self._simulate_latency()
        if self._is_stale(generation):
            return False
        self.conversations = self.generator.generate_conversations()
        self._finish_loading()
        return True

    async def open_chat_room(self, user_id: str) -> Optional[str]:
        """
        Create or reuse the room between the session user and ``user_id``.

        Returns:
            The room id, or None when nobody is signed in.
        """
        current_id = self._current_user_id()
        if current_id is None:
            return None
        await self._simulate_latency()
        self.current_chat_room_id = f"chat_{current_id}_{user_id}"
        return self.current_chat_room_id

    async def fetch_messages(self, chat_room_id: str) -> bool:
        user = self.session.current_user
        if user is None or self.is_loading:
            return False
        self.current_chat_room_id = chat_room_id
        generation = self._begin_loading()
        await self._simulate_latency()
        if self._is_stale(generation):
            return False
        self.results = self.generator.generate_messages(chat_room_id, user)
        self.cache_entities(self.results)
        for conversation in self.conversations:
            if conversation.id == chat_room_id:
                conversation.unread_count = 0
        self._finish_loading()
        return True

    def send_message(
        self,
        content: str,
        message_type: MessageType = MessageType.TEXT,
        image_url: Optional[str] = None,
        video_url: Optional[str] = None,
    ) -> Optional[Message]:
        """Append a message from the session user to the open room."""
        user = self.session.current_user
        if user is None or self.current_chat_room_id is None:
            return None
        message = Message(
            id=self.generator.new_id(),
            chat_room_id=self.current_chat_room_id,
            sender_id=user.id,
            sender_name=user.full_name,
            sender_profile_image_url=user.profile_image_url,
            content=content,
            message_type=MessageType(message_type),
            image_url=image_url,
            video_url=video_url,
            created_at=self.generator.now(),
        )
        self._append(message)
        return message

    def mark_message_as_read(self, message_id: str) -> bool:
        user_id = self._current_user_id()
        message = self.get_by_id(message_id)
        if user_id is None or message is None:
            return False
        message.is_read = True
        message.read_by[user_id] = self.generator.now()
        self.commit()
        return True

    def simulate_incoming_message(self) -> Optional[Message]:
        """Sometimes deliver a canned reply into the open room."""
        if self.current_chat_room_id is None or not self.results:
            return None
        if self.generator.rng.random() < 0.5:
            return None
        message = Message(
            id=self.generator.new_id(),
            chat_room_id=self.current_chat_room_id,
            sender_id="simulated_user",
            sender_name="Demo User",
            content=self.generator.rng.choice(INCOMING_MESSAGES),
            created_at=self.generator.now(),
        )
        self._append(message)
        return message

    def _append(self, message: Message) -> None:
        self.results.append(message)
        self.cache[message.id] = message
        for conversation in self.conversations:
            if conversation.id == message.chat_room_id:
                conversation.last_message = message
        self.commit()
        self.events.emit(MESSAGE, message)
