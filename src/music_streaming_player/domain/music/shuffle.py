"""Seeded shuffle permutations.

A permutation is a pure function of the context identity, its length, and an
opaque seed. Replaying the same ``(context, seed)`` pair after a restart or
reconnect yields the same order, which is what makes ``previous`` and resume
consistent while shuffling.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from functools import lru_cache

from music_streaming_player.domain.music.entities import PlaybackContext
from music_streaming_player.domain.shared.constants import PlayerConstants

_KEY_SEPARATOR = "\x1f"


def permutation_key(context: PlaybackContext, seed: str) -> int:
    """Derive the integer key that drives the permutation for ``context``."""
    material = _KEY_SEPARATOR.join(
        (seed, context.context_type.value, context.context_id, str(context.length))
    )
    return int.from_bytes(hashlib.sha256(material.encode("utf-8")).digest(), "big")


@lru_cache(maxsize=1024)
def _permutation(length: int, key: int) -> tuple[int, ...]:
    order = list(range(length))
    random.Random(key).shuffle(order)
    return tuple(order)


def shuffle_order(context: PlaybackContext, seed: str) -> tuple[int, ...]:
    """Return the shuffled traversal order as a tuple of context indices.

    The result is a bijection over ``range(context.length)``.
    """
    return _permutation(context.length, permutation_key(context, seed))


def derive_seed(seed: str) -> str:
    """Deterministically derive the seed used for the next reshuffle."""
    return hashlib.sha256(f"reshuffle{_KEY_SEPARATOR}{seed}".encode()).hexdigest()[:32]


def new_seed() -> str:
    """Mint a fresh random seed for a session that starts shuffling."""
    return secrets.token_hex(PlayerConstants.SHUFFLE_SEED_BYTES)
