"""Text helpers shared by the post store and the terminal output."""

import re
from typing import List

HASHTAG_PATTERN = re.compile(r"#\w+")
MENTION_PATTERN = re.compile(r"@\w+")


def extract_hashtags(text: str) -> List[str]:
    """Return every ``#tag`` in text, lower-cased, in order of appearance."""
    return [match.lower() for match in HASHTAG_PATTERN.findall(text or "")]


def extract_mentions(text: str) -> List[str]:
    """Return every ``@handle`` in text, lower-cased, in order of appearance."""
    return [match.lower() for match in MENTION_PATTERN.findall(text or "")]


def truncated(text: str, limit: int, trailing: str = "...") -> str:
    return text[:limit] + trailing if len(text) > limit else text


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def name_from_email(email: str) -> str:
    """Derive a display name from the local part of an email address."""
    local = email.split("@")[0]
    return capitalize_first(local.replace(".", " ")) or "Demo User"


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.lower() in (haystack or "").lower()
