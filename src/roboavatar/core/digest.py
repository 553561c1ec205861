"""Digest engine and index derivation.

The input text is hashed with SHA-512 and the 128-character hex digest is
carved into fixed-width chunks.  Each chunk, read as a base-16 integer,
is one deterministic selector in the index array.
"""

from __future__ import annotations

import hashlib
import logging
import re

from roboavatar.core.errors import MissingRequiredDataError, ParseError

logger = logging.getLogger(__name__)

DEFAULT_CHUNKS = 11

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def sha512_digest(text: str) -> str:
    """Return the lowercase SHA-512 hex digest of *text* (UTF-8)."""
    return hashlib.sha512(text.encode("utf-8")).hexdigest()


def split_digest(digest: str, chunks: int = DEFAULT_CHUNKS) -> list[int]:
    """Split *digest* into *chunks* equal-width integers, left to right.

    Chunk width is ``len(digest) // chunks``; trailing characters that do
    not fill a whole chunk are dropped.

    Raises:
        MissingRequiredDataError: If *digest* is empty or *chunks* is not
            in ``1..len(digest)``.
        ParseError: If a chunk contains anything but hex digits.
    """
    if not digest:
        raise MissingRequiredDataError("Cannot split an empty digest")
    if chunks < 1 or chunks > len(digest):
        raise MissingRequiredDataError(
            f"Chunk count must be between 1 and {len(digest)}, got {chunks}"
        )

    width = len(digest) // chunks
    values = []
    for i in range(chunks):
        piece = digest[i * width:(i + 1) * width]
        # int(x, 16) also accepts "0x", "_", whitespace and trailing newlines
        if not _HEX_RE.fullmatch(piece):
            raise ParseError(f"Digest chunk {i} is not hexadecimal: {piece!r}")
        values.append(int(piece, 16))
    return values


def derive_index_array(
    digest: str,
    chunks: int = DEFAULT_CHUNKS,
    duplicate: bool = True,
) -> list[int]:
    """Build the index array for *digest*.

    With *duplicate* set the chunk sequence is repeated once, doubling the
    number of slots available to sets with many categories.
    """
    values = split_digest(digest, chunks)
    if duplicate:
        values = values + values
    logger.debug("Derived %d indices from %d-char digest", len(values), len(digest))
    return values
