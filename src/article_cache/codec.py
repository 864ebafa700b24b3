"""Serialization of cache payloads.

Entries are stored as JSON text. Object key order and array order survive a
round trip, so ``decode(encode(v)) == v`` for any JSON-representable value.
"""

import json
from typing import Any

from article_cache.errors import DecodeError


def encode(value: Any) -> str:
    """Serialize a record or collection to JSON text."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def decode(text: str | bytes) -> Any:
    """Parse JSON text produced by :func:`encode`.

    Raises:
        DecodeError: If the text is not well-formed JSON
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise DecodeError(details={"reason": str(e)}) from e
