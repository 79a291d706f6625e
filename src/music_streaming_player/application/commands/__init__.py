"""
Application Commands (CQRS Write Side)

Command objects and their handlers for write operations.
Next/previous resolution lives here too: it changes the client's state,
even though the server keeps none of it.
"""

from music_streaming_player.application.commands.advance_track import (
    AdvanceResult,
    AdvanceStatus,
    AdvanceTrackCommand,
)
from music_streaming_player.application.commands.publish_catalog import (
    DeleteContextCommand,
    DeleteStatus,
    PublishTrackCommand,
    SaveContextCommand,
)
from music_streaming_player.application.commands.record_play import RecordPlayCommand

__all__ = [
    # Advance
    "AdvanceTrackCommand",
    "AdvanceResult",
    "AdvanceStatus",
    # History
    "RecordPlayCommand",
    # Catalog
    "PublishTrackCommand",
    "SaveContextCommand",
    "DeleteContextCommand",
    "DeleteStatus",
]
