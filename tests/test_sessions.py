"""
Test cases for the bounded recognition session registry.
"""
import sys
import unittest
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signchat.config import load_config
from signchat.recognizer import SignRecognizer
from signchat.sessions import SessionRegistry


class TestSessionRegistry(unittest.TestCase):
    """Test least-recently-used session bookkeeping."""

    def setUp(self):
        cfg = load_config()
        self.registry = SessionRegistry(lambda: SignRecognizer.from_config(cfg), max_sessions=3)

    def test_get_or_create_reuses_sessions(self):
        first = self.registry.get_or_create("a")
        self.assertIs(self.registry.get_or_create("a"), first)
        self.assertEqual(len(self.registry), 1)

    def test_get_does_not_create(self):
        self.assertIsNone(self.registry.get("nobody"))
        self.assertEqual(len(self.registry), 0)

    def test_never_exceeds_max_sessions(self):
        for i in range(1000):
            self.registry.get_or_create(f"client-{i}")
            self.assertLessEqual(len(self.registry), 3)
        self.assertEqual(list(self.registry), ["client-997", "client-998", "client-999"])

    def test_least_recently_used_is_evicted(self):
        for session_id in ("a", "b", "c"):
            self.registry.get_or_create(session_id)
        self.registry.get("a")
        self.registry.get_or_create("d")

        self.assertNotIn("b", self.registry)
        self.assertEqual(list(self.registry), ["c", "a", "d"])

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            SessionRegistry(lambda: None, max_sessions=0)


if __name__ == '__main__':
    unittest.main()
