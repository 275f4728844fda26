"""
Temporal smoothing of per-frame gesture matches.
"""
from collections import Counter, deque
from typing import Iterator, Optional, Sequence, Tuple

from .types import GestureEvent, MatchResult, Side

DEFAULT_HISTORY_CAPACITY = 5


class DetectionHistory:
    """Bounded FIFO of recent best-match labels."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._labels: deque = deque(maxlen=capacity)

    def push(self, label: str) -> None:
        """Append a label, evicting the oldest one when full."""
        self._labels.append(label)

    def most_common(self) -> Optional[Tuple[str, int]]:
        """
        Most frequent label and its count.

        Ties go to the label that appears first in the window.
        """
        if not self._labels:
            return None
        counts = Counter(self._labels)
        best_label, best_count = None, 0
        for label, count in counts.items():
            if count > best_count:
                best_label, best_count = label, count
        return best_label, best_count

    def clear(self) -> None:
        self._labels.clear()

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)


class TemporalStabilizer:
    """
    Turns noisy per-frame matches into de-duplicated gesture events.

    One instance belongs to one session; it is not shared between users.

    Repeat rule: a sign equal to the last emitted one is dropped only while
    its confidence is above repeat_confidence, so a repeat at lower
    confidence is emitted again.
    """

    def __init__(self, detection_threshold: float = 0.7, emit_threshold: float = 0.7,
                 repeat_confidence: float = 0.8, capacity: int = DEFAULT_HISTORY_CAPACITY):
        self.detection_threshold = detection_threshold
        self.emit_threshold = emit_threshold
        self.repeat_confidence = repeat_confidence
        self.history = DetectionHistory(capacity)
        self.last_sent_detection: Optional[str] = None

    def update(self, match: Optional[MatchResult],
               hands_used: Sequence[Side] = ()) -> Optional[GestureEvent]:
        """
        Feed one frame's best match.

        Args:
            match: Best template match for the frame, or None
            hands_used: Side labels of the hands seen in the frame

        Returns:
            GestureEvent when a stable sign should be emitted, None otherwise
        """
        if match is None or match.score <= self.detection_threshold:
            return None

        self.history.push(match.name)
        label, frequency = self.history.most_common()

        consistency = frequency / self.history.capacity
        confidence = (match.score + consistency) / 2

        if label == self.last_sent_detection and confidence > self.repeat_confidence:
            return None

        if confidence > self.emit_threshold:
            self.last_sent_detection = label
            return GestureEvent(text=label, confidence=confidence, hands_used=tuple(hands_used))

        return None

    def reset(self) -> None:
        """Forget all detections, e.g. on a user or mode change."""
        self.history.clear()
        self.last_sent_detection = None
