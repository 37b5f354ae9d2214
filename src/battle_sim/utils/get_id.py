import re

_NON_ID_CHARS = re.compile(r"[^a-z0-9]+")


def to_id(text: str) -> str:
    """Convert a display name to a lookup id: "Focus Sash" -> "focussash"."""
    return _NON_ID_CHARS.sub("", text.lower())
