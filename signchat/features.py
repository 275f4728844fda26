"""
Geometric feature extraction from hand landmarks.
"""
import logging
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Sequence

from .geometry import calculate_angle, calculate_distance
from .types import HandObservation, InvalidLandmarkSet, NUM_LANDMARKS

logger = logging.getLogger(__name__)

DEFAULT_SYMMETRY_THRESHOLD = 0.1


# MediaPipe landmark indices
class LM:
    WRIST = 0
    THUMB_MCP, THUMB_IP, THUMB_TIP = 2, 3, 4
    INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
    MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
    RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
    PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20


@dataclass(frozen=True)
class FeatureVector:
    """Scalar measurements of a single hand."""
    # Fingertip to wrist
    thumb_to_wrist: float
    index_to_wrist: float
    middle_to_wrist: float
    ring_to_wrist: float
    pinky_to_wrist: float

    # Angle at the joint below each fingertip, in degrees
    thumb_angle: float
    index_angle: float
    middle_angle: float
    ring_angle: float
    pinky_angle: float

    # Adjacent fingertips
    thumb_to_index: float
    index_to_middle: float
    middle_to_ring: float
    ring_to_pinky: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class PairFeatures:
    """Measurements that need a left and a right hand in the same frame."""
    hands_distance: float
    index_fingertips_distance: float
    hands_symmetric: bool
    left_hand_higher: bool

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class FrameFeatures:
    """All features extracted from one frame."""
    left: Optional[FeatureVector] = None
    right: Optional[FeatureVector] = None
    pair: Optional[PairFeatures] = None

    @property
    def has_both_hands(self) -> bool:
        return self.left is not None and self.right is not None


HAND_FEATURE_NAMES = frozenset(FeatureVector.__dataclass_fields__)
PAIR_FEATURE_NAMES = frozenset(PairFeatures.__dataclass_fields__)


def _check_landmarks(observation: HandObservation) -> None:
    if len(observation.landmarks) < NUM_LANDMARKS:
        raise InvalidLandmarkSet(
            f"{observation.side} hand has {len(observation.landmarks)} landmarks, "
            f"expected {NUM_LANDMARKS}"
        )


def extract_hand_features(observation: HandObservation) -> FeatureVector:
    """
    Extract single-hand features.

    Args:
        observation: Hand with at least 21 landmarks

    Returns:
        FeatureVector for the hand

    Raises:
        InvalidLandmarkSet: if fewer than 21 landmarks are present
    """
    _check_landmarks(observation)
    lm = observation.landmarks

    return FeatureVector(
        thumb_to_wrist=calculate_distance(lm[LM.THUMB_TIP], lm[LM.WRIST]),
        index_to_wrist=calculate_distance(lm[LM.INDEX_TIP], lm[LM.WRIST]),
        middle_to_wrist=calculate_distance(lm[LM.MIDDLE_TIP], lm[LM.WRIST]),
        ring_to_wrist=calculate_distance(lm[LM.RING_TIP], lm[LM.WRIST]),
        pinky_to_wrist=calculate_distance(lm[LM.PINKY_TIP], lm[LM.WRIST]),
        thumb_angle=calculate_angle(lm[LM.THUMB_MCP], lm[LM.THUMB_IP], lm[LM.THUMB_TIP]),
        index_angle=calculate_angle(lm[LM.INDEX_PIP], lm[LM.INDEX_DIP], lm[LM.INDEX_TIP]),
        middle_angle=calculate_angle(lm[LM.MIDDLE_PIP], lm[LM.MIDDLE_DIP], lm[LM.MIDDLE_TIP]),
        ring_angle=calculate_angle(lm[LM.RING_PIP], lm[LM.RING_DIP], lm[LM.RING_TIP]),
        pinky_angle=calculate_angle(lm[LM.PINKY_PIP], lm[LM.PINKY_DIP], lm[LM.PINKY_TIP]),
        thumb_to_index=calculate_distance(lm[LM.THUMB_TIP], lm[LM.INDEX_TIP]),
        index_to_middle=calculate_distance(lm[LM.INDEX_TIP], lm[LM.MIDDLE_TIP]),
        middle_to_ring=calculate_distance(lm[LM.MIDDLE_TIP], lm[LM.RING_TIP]),
        ring_to_pinky=calculate_distance(lm[LM.RING_TIP], lm[LM.PINKY_TIP]),
    )


def extract_pair_features(left: Optional[HandObservation], right: Optional[HandObservation],
                          symmetry_threshold: float = DEFAULT_SYMMETRY_THRESHOLD) -> PairFeatures:
    """
    Extract features relating a left and a right hand.

    Raises:
        InvalidLandmarkSet: if either hand is missing, mislabeled or short of landmarks
    """
    if left is None or right is None:
        raise InvalidLandmarkSet("Pair features need both a Left and a Right hand")
    if left.side != "Left" or right.side != "Right":
        raise InvalidLandmarkSet(
            f"Expected Left/Right hands, got {left.side}/{right.side}"
        )
    _check_landmarks(left)
    _check_landmarks(right)

    left_base = left.landmarks[LM.MIDDLE_MCP]
    right_base = right.landmarks[LM.MIDDLE_MCP]

    return PairFeatures(
        hands_distance=calculate_distance(left_base, right_base),
        index_fingertips_distance=calculate_distance(
            left.landmarks[LM.INDEX_TIP], right.landmarks[LM.INDEX_TIP]
        ),
        hands_symmetric=abs(left_base.y - right_base.y) < symmetry_threshold,
        # Image y grows downward
        left_hand_higher=left_base.y < right_base.y,
    )


def split_by_side(observations: Sequence[HandObservation]) -> Dict[str, HandObservation]:
    """Map side label to the first observation with that label."""
    by_side: Dict[str, HandObservation] = {}
    for obs in observations:
        if obs.side in by_side:
            logger.debug(f"Ignoring duplicate {obs.side} hand in frame")
            continue
        by_side[obs.side] = obs
    return by_side


def extract_frame_features(observations: Sequence[HandObservation],
                           symmetry_threshold: float = DEFAULT_SYMMETRY_THRESHOLD) -> FrameFeatures:
    """
    Extract every feature available from a frame's hands.

    Pair features are only present when both a Left and a Right hand were seen.
    """
    by_side = split_by_side(observations)
    left_obs = by_side.get("Left")
    right_obs = by_side.get("Right")

    left = extract_hand_features(left_obs) if left_obs is not None else None
    right = extract_hand_features(right_obs) if right_obs is not None else None

    pair = None
    if left_obs is not None and right_obs is not None:
        pair = extract_pair_features(left_obs, right_obs, symmetry_threshold)

    return FrameFeatures(left=left, right=right, pair=pair)
