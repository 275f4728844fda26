"""
In-memory chat message storage. Messages are lost when the process exits.
"""
import itertools
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

MessageType = Literal["text", "sign"]
MESSAGE_TYPES = ("text", "sign")


@dataclass
class Message:
    """A chat message, typed or signed."""
    id: str
    content: str
    type: MessageType
    user_id: Optional[str] = None
    username: Optional[str] = None
    confidence: Optional[float] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def validate(content: Any, type: Any) -> Optional[str]:
        """Return an error message, or None when the data is acceptable."""
        if not content or not isinstance(content, str):
            return "Content is required and must be a string"
        if type not in MESSAGE_TYPES:
            return 'Type is required and must be either "text" or "sign"'
        return None

    def to_client_format(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "type": self.type,
            "userId": self.user_id,
            "username": self.username,
            "confidence": self.confidence,
            "timestamp": self.timestamp.isoformat(),
        }


class MessageStore:
    """Append-only message list shared by all requests."""

    def __init__(self):
        self._messages: List[Message] = []
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    def add(self, content: str, type: MessageType, user_id: Optional[str] = None,
            username: Optional[str] = None, confidence: Optional[float] = None) -> Message:
        """
        Store a new message.

        Raises:
            ValueError: if content is empty or the type is unknown
        """
        error = Message.validate(content, type)
        if error:
            raise ValueError(error)

        with self._lock:
            message = Message(
                id=f"{int(time.time() * 1000)}-{next(self._ids)}",
                content=content,
                type=type,
                user_id=user_id,
                username=username,
                confidence=confidence,
            )
            self._messages.append(message)
        return message

    def all(self) -> List[Message]:
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)
