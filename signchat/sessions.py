"""
Per-session recognizers for the chat backend.
"""
import logging
from collections import OrderedDict
from typing import Callable, Iterator, Optional

from .recognizer import SignRecognizer

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Recognizers keyed by session id, bounded in size.

    Looking a session up marks it as recently used. When a new session would
    exceed max_sessions, the least recently used one is dropped, so clients
    inventing ids cannot grow the map without limit.
    """

    def __init__(self, factory: Callable[[], SignRecognizer], max_sessions: int = 256):
        """
        Initialize the registry.

        Args:
            factory: Builds a fresh recognizer for a new session
            max_sessions: Maximum number of sessions kept at once
        """
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.factory = factory
        self.max_sessions = max_sessions
        self._recognizers: "OrderedDict[str, SignRecognizer]" = OrderedDict()

    def get(self, session_id: str) -> Optional[SignRecognizer]:
        """Existing recognizer for a session, or None."""
        recognizer = self._recognizers.get(session_id)
        if recognizer is not None:
            self._recognizers.move_to_end(session_id)
        return recognizer

    def get_or_create(self, session_id: str) -> SignRecognizer:
        recognizer = self.get(session_id)
        if recognizer is not None:
            return recognizer

        while len(self._recognizers) >= self.max_sessions:
            evicted, _ = self._recognizers.popitem(last=False)
            logger.info(f"🧹 Evicted idle recognition session: {evicted}")

        logger.info(f"🆕 New recognition session: {session_id}")
        recognizer = self._recognizers[session_id] = self.factory()
        return recognizer

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._recognizers

    def __len__(self) -> int:
        return len(self._recognizers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._recognizers)
