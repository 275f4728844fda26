"""
Configuration management for sign language recognition.
"""
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List, Tuple
from dataclasses import dataclass, field

from .templates import GestureTemplate, parse_templates

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"
CONFIG_ENV_VAR = "SIGNCHAT_CONFIG"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class RecognitionConfig:
    """Matching and stabilization thresholds."""
    detection_threshold: float = 0.7
    emit_threshold: float = 0.7
    repeat_confidence: float = 0.8
    history_capacity: int = 5
    symmetry_threshold: float = 0.1


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    window_name: str


@dataclass
class ServerConfig:
    """Chat backend settings."""
    host: str
    port: int
    cors_origins: List[str] = field(default_factory=list)
    max_sessions: int = 256


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    recognition: RecognitionConfig
    display: DisplayConfig
    server: ServerConfig
    templates: Tuple[GestureTemplate, ...]


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses $SIGNCHAT_CONFIG or the
            packaged config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        model_complexity=mp_data.get('model_complexity', 1),
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    recognition = RecognitionConfig(**data.get('recognition', {}))
    if recognition.history_capacity < 1:
        raise ValueError("recognition.history_capacity must be at least 1")

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        window_name=display_data['window_name']
    )

    server_data = data['server']
    server = ServerConfig(
        host=server_data['host'],
        port=int(os.getenv("PORT", server_data['port'])),
        cors_origins=list(server_data.get('cors_origins', [])),
        max_sessions=server_data.get('max_sessions', 256)
    )
    if server.max_sessions < 1:
        raise ValueError("server.max_sessions must be at least 1")

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        recognition=recognition,
        display=display,
        server=server,
        templates=parse_templates(data['templates'])
    )
