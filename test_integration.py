"""
Integration test to verify all components can be imported and work together.
"""
import asyncio
import importlib.util
import sys
from pathlib import Path

# Add project root and test helpers to path for imports
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent / "tests"))

from signchat.types import GestureEvent, HandObservation, ChatSinkProto
from signchat.config import load_config
from signchat.chat_mock import MockChatClient
from signchat.recognizer import SignRecognizer

from synthetic_hands import open_hand


async def run_integration() -> bool:
    """Run a held sign through the whole pipeline into the mock chat."""
    print("Testing integration of sign recognition components...")

    # Test 1: Load configuration
    print("\n1. Testing configuration loading...")
    config = load_config()
    print("✓ Config loaded successfully")
    print(f"  Camera: {config.camera.width}x{config.camera.height} @ {config.camera.fps}fps")
    print(f"  MediaPipe: max_hands={config.mediapipe.max_num_hands}")
    print(f"  Templates: {', '.join(t.name for t in config.templates)}")

    # Test 2: Recognize a held sign
    print("\n2. Testing recognition pipeline...")
    recognizer = SignRecognizer.from_config(config)
    hand: HandObservation = open_hand("Right")
    events = [recognizer.process_frame([hand]) for _ in range(5)]
    emitted = [e for e in events if e is not None]
    if len(emitted) != 1 or emitted[0].text != "HELLO":
        print(f"✗ Expected one HELLO event, got {emitted}")
        return False
    print(f"✓ Recognized: {emitted[0]}")

    # Test 3: Mock chat client
    print("\n3. Testing mock chat client...")
    chat = MockChatClient()
    event: GestureEvent = emitted[0]
    await chat.send_sign(event)
    if not isinstance(chat, ChatSinkProto):
        print("✗ MockChatClient does not implement ChatSinkProto")
        return False
    print("✓ MockChatClient implements ChatSinkProto correctly")

    # Test 4: Landmarks (basic import test)
    print("\n4. Testing landmarks module...")
    if importlib.util.find_spec("mediapipe") is None:
        print("- mediapipe not installed, skipping")
    else:
        from signchat.landmarks import HandsTracker

        tracker = HandsTracker(
            max_num_hands=config.mediapipe.max_num_hands,
            model_complexity=config.mediapipe.model_complexity,
            min_detection_conf=config.mediapipe.min_detection_confidence,
            min_tracking_conf=config.mediapipe.min_tracking_confidence
        )
        tracker.close()
        print("✓ HandsTracker created successfully")

    print("\n🎉 All integration tests passed!")
    print("\nNext steps:")
    print("1. Install dependencies: pip install -e .[camera]")
    print("2. Run the webcam application: python -m signchat.main")
    print("3. Or start the chat backend: python -m signchat.server")

    return True


def test_integration():
    assert asyncio.run(run_integration())


if __name__ == "__main__":
    success = asyncio.run(run_integration())
    sys.exit(0 if success else 1)
