"""The signed-in user, handed to each store that needs it."""

import logging
from typing import Optional

from .models import User

logger = logging.getLogger(__name__)


class Session:
    """Holds the current user for a running app instance."""

    def __init__(self, user: Optional[User] = None):
        self.current_user = user

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def user_id(self) -> Optional[str]:
        return self.current_user.id if self.current_user else None

    def sign_in(self, user: User) -> None:
        self.current_user = user
        logger.info(f"Signed in as {user.full_name} <{user.email}>")

    def sign_out(self) -> None:
        if self.current_user:
            logger.info(f"Signed out {self.current_user.email}")
        self.current_user = None

    def __repr__(self) -> str:
        who = self.current_user.email if self.current_user else "anonymous"
        return f"<Session {who}>"
