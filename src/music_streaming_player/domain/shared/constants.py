"""Domain-wide constants."""

from __future__ import annotations


class PlayerConstants:
    """Limits applied to playback contexts and history queries."""

    MAX_CONTEXT_TRACKS = 10_000
    DEFAULT_HISTORY_LIMIT = 20
    MAX_HISTORY_LIMIT = 500

    # Bytes of entropy in a freshly minted shuffle seed.
    SHUFFLE_SEED_BYTES = 16

    # Bound on reseeding attempts when a reshuffle would replay the finished track.
    MAX_RESHUFFLE_ATTEMPTS = 16


class SQLPragmas:
    """SQLite PRAGMA statements for database configuration.

    These pragmas are applied to each connection to ensure consistent behavior.
    """

    JOURNAL_MODE_WAL = "PRAGMA journal_mode=WAL"
    FOREIGN_KEYS_ON = "PRAGMA foreign_keys=ON"
    BUSY_TIMEOUT = "PRAGMA busy_timeout={timeout}"
    PAGE_COUNT = "PRAGMA page_count"
    PAGE_SIZE = "PRAGMA page_size"


class HttpHeaders:
    """Header values parsed at the HTTP boundary."""

    BEARER_PREFIX = "bearer "
