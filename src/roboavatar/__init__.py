"""RoboAvatar -- deterministic robot avatars from arbitrary text.

Top-level convenience re-exports::

    from roboavatar import generate, RoboHash
    from roboavatar.core import RoboSet, Colour, sha512_digest  # pipeline primitives
"""

__version__ = "0.1.0"

from roboavatar.generator import RoboHash, generate

__all__ = ["__version__", "RoboHash", "generate"]
