"""
Application Queries (CQRS Read Side)

Query objects and handlers for read operations.
Queries do not modify state, only retrieve data.
"""

from music_streaming_player.application.queries.get_catalog import (
    ContextInfo,
    GetContextQuery,
    GetTrackQuery,
)
from music_streaming_player.application.queries.get_history import (
    GetHistoryQuery,
    GetMostPlayedQuery,
    GetPlayCountQuery,
    HistoryInfo,
    MostPlayedInfo,
    PlayCount,
)

__all__ = [
    "GetContextQuery",
    "GetTrackQuery",
    "ContextInfo",
    "GetHistoryQuery",
    "HistoryInfo",
    "GetMostPlayedQuery",
    "GetPlayCountQuery",
    "MostPlayedInfo",
    "PlayCount",
]
