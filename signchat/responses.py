"""
Canned chat replies and placeholder avatar animation data.

Nothing here is generated by a model: replies come from fixed phrase tables
and the animation keyframes are the same gentle wave for every word.
"""
import random
import re
from types import MappingProxyType
from typing import Any, Dict, List, Optional

LOW_CONFIDENCE_NOTE_BELOW = 0.8
SECONDS_PER_WORD = 2.0
MIN_RESPONSE_DURATION = 2.0
SECONDS_PER_CHARACTER = 0.1
ANIMATION_TITLE_LENGTH = 20

SIGN_RESPONSES = MappingProxyType({
    "HELLO": (
        "Hi! Nice to see you!",
        "Hello! How are you?",
        "Hi there! Great sign!",
    ),
    "THANK YOU": (
        "You're welcome! Always happy to help.",
        "No problem! Come back any time.",
        "Glad I could help!",
    ),
    "YES": (
        "Great! Got it.",
        "Okay, agreed.",
        "Yes, that's right!",
    ),
    "NO": (
        "Understood, okay.",
        "Alright, I'll keep that in mind.",
        "Got it, thanks for clarifying.",
    ),
    "PLEASE": (
        "Of course! How can I help?",
        "Happy to help!",
        "Yes, of course!",
    ),
})

# (pattern, reply) checked in order
TEXT_RESPONSES = (
    (re.compile(r"\bhello\b|\bhi\b"), "Hi! Nice to chat with you. You can type or show me signs!"),
    (re.compile(r"how are you|how's it going"), "I'm doing great! Ready to help you learn sign language."),
    (re.compile(r"thank"), "You're welcome! Always happy to help with sign language."),
    (re.compile(r"help"), "Of course! Show me a sign and I'll recognize it, or ask a question about sign language."),
    (re.compile(r"sign"), "Sign language is a wonderful way to communicate! Show me any sign and I'll try to understand it."),
)

DEFAULT_TEXT_RESPONSES = (
    "Interesting! Tell me more.",
    "I see. What else would you like to talk about?",
    "Thanks for the message! You can also show me a sign.",
    "Okay! Try showing me a sign and I'll recognize it.",
    "Got it! Now how about showing me a sign?",
)

# Normalized keyframe offsets for one sign: (time fraction, position, rotation)
_WAVE = (
    (0.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
    (0.25, (0.2, 0.1, 0.0), (0.1, 0.0, 0.1)),
    (0.5, (0.4, 0.2, 0.0), (0.2, 0.0, 0.2)),
    (0.75, (0.2, 0.1, 0.0), (0.1, 0.0, 0.1)),
    (1.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
)

_RESPONSE_WAVE = (
    (0.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
    (0.25, (0.1, 0.1, 0.0), (0.1, 0.1, 0.0)),
    (0.5, (0.2, 0.2, 0.1), (0.2, 0.0, 0.1)),
    (0.75, (0.1, 0.1, 0.0), (0.1, -0.1, 0.0)),
    (1.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
)


def _xyz(values) -> Dict[str, float]:
    return dict(zip(("x", "y", "z"), values))


def _keyframes(wave, duration: float) -> List[Dict[str, Any]]:
    return [
        {"time": fraction * duration, "position": _xyz(position), "rotation": _xyz(rotation)}
        for fraction, position, rotation in wave
    ]


def generate_sign_response(sign_text: str, confidence: Optional[float] = None,
                           rng: Optional[random.Random] = None) -> str:
    """
    Reply to a recognized sign.

    Args:
        sign_text: Recognized sign, e.g. "HELLO"
        confidence: Recognition confidence; a note is appended below 0.8
        rng: Random source for picking a phrase

    Returns:
        Reply text
    """
    rng = rng or random
    replies = SIGN_RESPONSES.get(sign_text.upper()) or (
        f'I see the sign "{sign_text}". Interesting!',
        f'I understood your sign "{sign_text}".',
        f'Thanks for the sign "{sign_text}"!',
    )
    response = rng.choice(replies)

    if confidence and confidence < LOW_CONFIDENCE_NOTE_BELOW:
        return f"{response} (Recognition confidence: {round(confidence * 100)}%)"
    return response


def generate_text_response(text: str, rng: Optional[random.Random] = None) -> str:
    """Reply to a typed message using simple keyword rules."""
    rng = rng or random
    lower_text = text.lower()
    for pattern, reply in TEXT_RESPONSES:
        if pattern.search(lower_text):
            return reply
    return rng.choice(DEFAULT_TEXT_RESPONSES)


def text_to_sign_animation(text: str) -> Dict[str, Any]:
    """Placeholder avatar animation, one fixed-length sign per word."""
    words = text.split()
    sequence = [
        {
            "word": word,
            "startTime": index * SECONDS_PER_WORD,
            "duration": SECONDS_PER_WORD,
            "keyframes": _keyframes(_WAVE, SECONDS_PER_WORD),
        }
        for index, word in enumerate(words)
    ]
    return {
        "text": text,
        "animationSequence": sequence,
        "totalDuration": len(words) * SECONDS_PER_WORD,
    }


def generate_response_animation(response_text: str) -> Dict[str, Any]:
    """Placeholder avatar animation for a reply, longer for longer replies."""
    duration = max(MIN_RESPONSE_DURATION, len(response_text) * SECONDS_PER_CHARACTER)
    title = response_text[:ANIMATION_TITLE_LENGTH]
    if len(response_text) > ANIMATION_TITLE_LENGTH:
        title += "..."
    return {
        "word": title,
        "frames": _keyframes(_RESPONSE_WAVE, duration),
        "duration": duration,
    }
