"""
Mock chat client for trying out recognized signs without a backend.
"""
from typing import List

from .responses import generate_sign_response
from .types import GestureEvent


class MockChatClient:
    """Mock chat client that prints signs and canned replies instead of sending them."""

    def __init__(self, username: str = "You"):
        """Initialize the mock chat client."""
        self.username = username
        self.sent: List[GestureEvent] = []

    async def send_sign(self, event: GestureEvent) -> None:
        """Print the sign and a canned reply instead of posting them."""
        self.sent.append(event)
        print(f"[MockChat] {self.username}: {event.text} "
              f"({event.confidence:.0%}, hands={list(event.hands_used)}) (message #{len(self.sent)})")
        print(f"[MockChat] Assistant: {generate_sign_response(event.text, event.confidence)}")

    def reset_counters(self) -> None:
        """Forget sent messages."""
        self.sent.clear()
