"""
Hand landmark detection using MediaPipe.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import List, Sequence

from .types import HandObservation, Landmark, SIDES

# Joint chains from the wrist through each fingertip
FINGER_CHAINS = {
    "thumb": [0, 1, 2, 3, 4],
    "index": [0, 5, 6, 7, 8],
    "middle": [0, 9, 10, 11, 12],
    "ring": [0, 13, 14, 15, 16],
    "pinky": [0, 17, 18, 19, 20],
}

# BGR colors per hand
HAND_COLORS = {
    "Left": {"point": (107, 107, 255), "connection": (107, 107, 255)},
    "Right": {"point": (196, 205, 78), "connection": (196, 205, 78)},
}


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 2, model_complexity: int = 1,
                 min_detection_conf: float = 0.5, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            model_complexity: MediaPipe model complexity (0 or 1)
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> List[HandObservation]:
        """
        Process a frame and return every detected hand.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            One HandObservation per detected hand (empty if none)
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)
        return observations_from_results(results)

    def close(self) -> None:
        self.hands.close()


def observations_from_results(results) -> List[HandObservation]:
    """Convert a MediaPipe Hands result into HandObservations."""
    if not results.multi_hand_landmarks:
        return []

    observations = []
    for hand_landmarks, handedness in zip(results.multi_hand_landmarks,
                                          results.multi_handedness or []):
        classification = handedness.classification[0]
        if classification.label not in SIDES:
            continue
        observations.append(HandObservation(
            landmarks=tuple(Landmark(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark),
            side=classification.label,
            score=classification.score,
        ))
    return observations


def draw_hands(frame: np.ndarray, observations: Sequence[HandObservation]) -> np.ndarray:
    """
    Draw finger chains and joints for each hand.

    Args:
        frame: Input frame
        observations: Hands with landmarks in [0..1] range

    Returns:
        Frame with landmarks drawn
    """
    height, width = frame.shape[:2]

    for obs in observations:
        style = HAND_COLORS.get(obs.side, HAND_COLORS["Right"])
        points = [(int(lm.x * width), int(lm.y * height)) for lm in obs.landmarks]

        for chain in FINGER_CHAINS.values():
            for start, end in zip(chain, chain[1:]):
                cv2.line(frame, points[start], points[end], style["connection"], 2)

        for px, py in points:
            cv2.circle(frame, (px, py), 4, style["point"], -1)

    return frame
