"""
Webcam application for sign language recognition.
"""
import argparse
import asyncio
import logging
import sys
from typing import Optional

import cv2

from .chat_mock import MockChatClient
from .config import load_config
from .landmarks import HandsTracker, draw_hands
from .recognizer import SignRecognizer
from .types import ChatSinkProto, InvalidLandmarkSet

logger = logging.getLogger(__name__)


class SignChatApp:
    """Main application class for webcam sign recognition."""

    def __init__(self, config_path: Optional[str] = None, chat: Optional[ChatSinkProto] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            model_complexity=self.config.mediapipe.model_complexity,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.chat = chat or MockChatClient()
        self.recognizer = SignRecognizer.from_config(self.config)
        self.last_sign = ""

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def run(self):
        """Run the main application loop."""
        print(f"Starting {self.config.display.window_name}")
        print(f"🤟 Known signs: {', '.join(t.name for t in self.config.templates)}")
        print("Press 'r' to reset recognition, 'q' to quit")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    print("Failed to read frame from camera")
                    break

                observations = self.tracker.process(frame)

                # One bad frame must not end the session
                try:
                    event = self.recognizer.process_frame(observations)
                except (InvalidLandmarkSet, ArithmeticError, ValueError) as e:
                    logger.warning(f"Skipping frame: {e}")
                    event = None

                if event:
                    self.last_sign = f"{event.text} ({event.confidence:.0%})"
                    await self.chat.send_sign(event)

                if observations and self.config.display.show_landmarks:
                    frame = draw_hands(frame, observations)

                hands_text = ", ".join(
                    f"{obs.side} {obs.score:.0%}" for obs in observations
                ) or "No hands detected"
                cv2.putText(frame, hands_text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
                if self.last_sign:
                    cv2.putText(frame, f"Last sign: {self.last_sign}", (10, 60),
                                cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 255, 0), 2)
                cv2.putText(frame, "'r' reset | 'q' quit", (10, frame.shape[0] - 20),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                if key == ord('r'):
                    self.recognizer.reset()
                    self.last_sign = ""
        finally:
            self.tracker.close()
            self.cap.release()
            cv2.destroyAllWindows()


async def main(argv=None) -> int:
    """Entry point for the application."""
    parser = argparse.ArgumentParser(description="Recognize signs from the webcam")
    parser.add_argument("--config", help="Path to a YAML config file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        app = SignChatApp(config_path=args.config)
        await app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
    except (RuntimeError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
