"""
Test cases for canned replies, animation data, message storage and the mock chat client.
"""
import asyncio
import io
import random
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signchat.chat_mock import MockChatClient
from signchat.messages import MessageStore
from signchat.responses import (
    DEFAULT_TEXT_RESPONSES,
    SIGN_RESPONSES,
    generate_response_animation,
    generate_sign_response,
    generate_text_response,
    text_to_sign_animation,
)
from signchat.types import ChatSinkProto, GestureEvent


class TestSignResponses(unittest.TestCase):
    """Test replies to recognized signs."""

    def setUp(self):
        self.rng = random.Random(7)

    def test_known_sign(self):
        reply = generate_sign_response("HELLO", 0.95, rng=self.rng)
        self.assertIn(reply, SIGN_RESPONSES["HELLO"])

    def test_case_insensitive(self):
        reply = generate_sign_response("thank you", rng=self.rng)
        self.assertIn(reply, SIGN_RESPONSES["THANK YOU"])

    def test_low_confidence_note(self):
        reply = generate_sign_response("YES", 0.75, rng=self.rng)
        self.assertTrue(reply.endswith("(Recognition confidence: 75%)"))

    def test_no_note_at_threshold(self):
        reply = generate_sign_response("YES", 0.8, rng=self.rng)
        self.assertIn(reply, SIGN_RESPONSES["YES"])

    def test_unknown_sign(self):
        reply = generate_sign_response("LOVE", rng=self.rng)
        self.assertIn('"LOVE"', reply)


class TestTextResponses(unittest.TestCase):
    """Test keyword replies to typed messages."""

    def test_greeting(self):
        self.assertTrue(generate_text_response("hi").startswith("Hi!"))
        self.assertTrue(generate_text_response("Hello there").startswith("Hi!"))

    def test_keywords(self):
        self.assertIn("doing great", generate_text_response("How are you today?"))
        self.assertIn("welcome", generate_text_response("Thanks a lot"))
        self.assertIn("Of course", generate_text_response("can you help me"))
        self.assertIn("wonderful", generate_text_response("teach me to sign"))

    def test_greeting_needs_a_whole_word(self):
        """Words that merely end in "hi" are not greetings."""
        for text in ("I love sushi", "Delhi is far", "this is fine"):
            with self.subTest(text=text):
                self.assertFalse(generate_text_response(text, rng=random.Random(1)).startswith("Hi!"))
        self.assertTrue(generate_text_response("Hi, friend").startswith("Hi!"))
        self.assertTrue(generate_text_response("oh hi").startswith("Hi!"))

    def test_fallback(self):
        reply = generate_text_response("the weather is nice", rng=random.Random(1))
        self.assertIn(reply, DEFAULT_TEXT_RESPONSES)


class TestAnimations(unittest.TestCase):
    """Test placeholder avatar animation data."""

    def test_text_to_sign(self):
        animation = text_to_sign_animation("hello friend")
        self.assertEqual(animation["text"], "hello friend")
        self.assertEqual(animation["totalDuration"], 4.0)

        words = animation["animationSequence"]
        self.assertEqual([w["word"] for w in words], ["hello", "friend"])
        self.assertEqual([w["startTime"] for w in words], [0.0, 2.0])
        keyframes = words[0]["keyframes"]
        self.assertEqual(keyframes[0]["time"], 0.0)
        self.assertEqual(keyframes[-1]["time"], 2.0)
        self.assertEqual(set(keyframes[2]["position"]), {"x", "y", "z"})

    def test_short_response_duration(self):
        animation = generate_response_animation("Ok")
        self.assertEqual(animation["duration"], 2.0)
        self.assertEqual(animation["word"], "Ok")

    def test_long_response(self):
        text = "x" * 50
        animation = generate_response_animation(text)
        self.assertAlmostEqual(animation["duration"], 5.0)
        self.assertEqual(animation["word"], "x" * 20 + "...")
        self.assertAlmostEqual(animation["frames"][-1]["time"], 5.0)


class TestMessageStore(unittest.TestCase):
    """Test in-memory message storage."""

    def setUp(self):
        self.store = MessageStore()

    def test_add_and_list(self):
        first = self.store.add("hello", "text", username="Ana")
        second = self.store.add("HELLO", "sign", confidence=0.8)

        self.assertEqual(self.store.all(), [first, second])
        self.assertNotEqual(first.id, second.id)
        data = second.to_client_format()
        self.assertEqual(data["type"], "sign")
        self.assertEqual(data["confidence"], 0.8)
        self.assertIn("userId", data)

    def test_rejects_empty_content(self):
        with self.assertRaises(ValueError):
            self.store.add("", "text")
        self.assertEqual(len(self.store), 0)

    def test_rejects_unknown_type(self):
        with self.assertRaises(ValueError):
            self.store.add("hi", "video")

    def test_clear(self):
        self.store.add("hi", "text")
        self.store.clear()
        self.assertEqual(self.store.all(), [])


class TestMockChatClient(unittest.TestCase):
    """Test the printing chat client."""

    def test_is_chat_sink(self):
        self.assertIsInstance(MockChatClient(), ChatSinkProto)

    def test_send_sign(self):
        client = MockChatClient(username="Tester")
        event = GestureEvent("HELLO", 0.9, ("Right",))

        out = io.StringIO()
        with redirect_stdout(out):
            asyncio.run(client.send_sign(event))

        self.assertEqual(client.sent, [event])
        self.assertIn("Tester: HELLO", out.getvalue())
        self.assertIn("Assistant:", out.getvalue())

    def test_reset_counters(self):
        client = MockChatClient()
        with redirect_stdout(io.StringIO()):
            asyncio.run(client.send_sign(GestureEvent("YES", 0.8, ("Left",))))
        client.reset_counters()
        self.assertEqual(client.sent, [])


if __name__ == '__main__':
    unittest.main()
