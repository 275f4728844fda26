"""
Per-session sign recognition pipeline.
"""
import logging
from typing import List, Optional, Sequence

from .config import Cfg, RecognitionConfig
from .features import extract_frame_features
from .matcher import TemplateMatcher
from .stabilizer import TemporalStabilizer
from .templates import GestureTemplate
from .types import GestureEvent, HandObservation

logger = logging.getLogger(__name__)


class SignRecognizer:
    """
    Runs feature extraction, template matching and stabilization on each frame.

    Each session (user, connection, camera loop) needs its own instance.
    """

    def __init__(self, templates: Sequence[GestureTemplate],
                 recognition: Optional[RecognitionConfig] = None):
        """Initialize the pipeline with a template table and thresholds."""
        self.recognition = recognition or RecognitionConfig()
        self.matcher = TemplateMatcher(templates)
        self.stabilizer = TemporalStabilizer(
            detection_threshold=self.recognition.detection_threshold,
            emit_threshold=self.recognition.emit_threshold,
            repeat_confidence=self.recognition.repeat_confidence,
            capacity=self.recognition.history_capacity,
        )

    @classmethod
    def from_config(cls, cfg: Cfg) -> "SignRecognizer":
        return cls(cfg.templates, cfg.recognition)

    def process_frame(self, observations: Sequence[HandObservation]) -> Optional[GestureEvent]:
        """
        Process the hands seen in one frame.

        Args:
            observations: Hands detected in the frame (may be empty)

        Returns:
            GestureEvent if a stable sign was recognized, None otherwise

        Raises:
            InvalidLandmarkSet: if a hand has fewer than 21 landmarks
        """
        if not observations:
            return None

        features = extract_frame_features(
            observations, symmetry_threshold=self.recognition.symmetry_threshold
        )
        match = self.matcher.match(features)

        hands_used: List[str] = [obs.side for obs in observations]
        event = self.stabilizer.update(match, hands_used)
        if event is not None:
            logger.info(f"Recognized sign {event.text} (confidence {event.confidence:.2f}, hands {hands_used})")
        return event

    def reset(self) -> None:
        """Clear detection history, e.g. on a user or mode change."""
        self.stabilizer.reset()
        logger.debug("Recognition state reset")
