# =============================================================================
# core/greeting.py  —  Greeting formatter
# =============================================================================
# Pure: no I/O, no failure mode once the arguments are valid.
# =============================================================================

from core.models import Envelope, GreetArgs

_TEMPLATES = {
    "ko": "안녕하세요, {name}님!",
    "en": "Hey there, {name}! 👋 Nice to meet you!",
}


def greeting_text(name: str, language: str = "en") -> str:
    """Return the greeting for ``name``; anything but "ko" gets English."""
    template = _TEMPLATES["ko"] if language == "ko" else _TEMPLATES["en"]
    return template.format(name=name)


def greet(args: GreetArgs) -> Envelope:
    return Envelope(greeting_text(args.name, args.language))
