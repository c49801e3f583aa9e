"""Inbound post model - Pure data structures.

Posts arrive as raw tweet mappings from the stream; the engine only
needs the author id and the body text.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Post:
    """An inbound message from the post stream.

    Attributes:
        author_id: Author identifier (tweet user.id_str)
        text: Body text
    """
    author_id: str
    text: str

    @classmethod
    def from_tweet(cls, tweet: Mapping[str, Any]) -> "Post":
        """Build a Post from a raw tweet mapping.

        Pure function. Extended (long) tweets carry the full body under
        extended_tweet.full_text. A tweet without a user gets an empty
        author id, which never matches a trusted author.
        """
        user = tweet.get("user") or {}
        author_id = user.get("id_str")
        if author_id is None and user.get("id") is not None:
            author_id = str(user["id"])

        extended = tweet.get("extended_tweet") or {}
        text = extended.get("full_text") or tweet.get("text") or ""

        return cls(author_id=author_id or "", text=text)


def coerce_post(raw: Post | Mapping[str, Any]) -> Post:
    """Accept either a Post or a raw tweet mapping."""
    if isinstance(raw, Post):
        return raw
    return Post.from_tweet(raw)
