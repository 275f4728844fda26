"""
Type definitions for sign language recognition.
"""
from dataclasses import dataclass, field
from typing import Literal, Protocol, Tuple, runtime_checkable


Side = Literal["Left", "Right"]
SIDES = ("Left", "Right")

NUM_LANDMARKS = 21


class InvalidLandmarkSet(ValueError):
    """Raised when a caller hands over landmarks the extractor cannot use."""


@dataclass(frozen=True)
class Landmark:
    """One tracked point in a hand's normalized coordinate frame."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class HandObservation:
    """One hand's landmarks for a single frame."""
    landmarks: Tuple[Landmark, ...]
    side: Side
    score: float = 1.0

    def __post_init__(self):
        if self.side not in SIDES:
            raise InvalidLandmarkSet(f"Unknown hand side: {self.side!r}")
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "landmarks", tuple(self.landmarks))


@dataclass(frozen=True)
class MatchResult:
    """Best template match for a frame."""
    name: str
    score: float


@dataclass(frozen=True)
class GestureEvent:
    """A stabilized, recognized sign."""
    text: str
    confidence: float
    hands_used: Tuple[Side, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "confidence": self.confidence,
            "handsUsed": list(self.hands_used),
        }


@runtime_checkable
class ChatSinkProto(Protocol):
    """Abstract protocol for consumers of recognized gestures."""

    async def send_sign(self, event: GestureEvent) -> None:
        """Deliver a recognized sign to the chat."""
        ...
