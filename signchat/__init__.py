"""
Sign Chat

Recognizes a small set of signs from hand landmarks by matching geometric
features against static gesture templates, smoothing the per-frame matches
into stable chat messages.
"""

__version__ = "0.1.0"
__author__ = "Sign Chat Team"

from .types import (
    ChatSinkProto,
    GestureEvent,
    HandObservation,
    InvalidLandmarkSet,
    Landmark,
    MatchResult,
)
from .config import load_config, Cfg, RecognitionConfig
from .geometry import calculate_angle, calculate_distance
from .features import (
    FeatureVector,
    FrameFeatures,
    PairFeatures,
    extract_frame_features,
    extract_hand_features,
    extract_pair_features,
)
from .templates import FeatureRange, GestureTemplate, parse_templates
from .matcher import TemplateMatcher
from .stabilizer import DetectionHistory, TemporalStabilizer
from .recognizer import SignRecognizer
from .chat_mock import MockChatClient

__all__ = [
    "ChatSinkProto",
    "GestureEvent",
    "HandObservation",
    "InvalidLandmarkSet",
    "Landmark",
    "MatchResult",
    "load_config",
    "Cfg",
    "RecognitionConfig",
    "calculate_angle",
    "calculate_distance",
    "FeatureVector",
    "FrameFeatures",
    "PairFeatures",
    "extract_frame_features",
    "extract_hand_features",
    "extract_pair_features",
    "FeatureRange",
    "GestureTemplate",
    "parse_templates",
    "TemplateMatcher",
    "DetectionHistory",
    "TemporalStabilizer",
    "SignRecognizer",
    "MockChatClient",
]
