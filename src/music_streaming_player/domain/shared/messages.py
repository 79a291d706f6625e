"""Centralized message constants for error messages, validation, and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Track Validation Errors
    EMPTY_TRACK_ID = "Track ID cannot be empty"

    # Context Validation Errors
    CONTEXT_TOO_LARGE = "Playback context cannot hold more than {max_tracks} tracks"
    UNKNOWN_CONTEXT_TRACKS = "Context references unknown tracks: {track_ids}"

    # Queue Validation Errors
    POSITION_OUT_OF_RANGE = "Position {position} is outside a context of {length} tracks"
    POSITION_TRACK_MISMATCH = "Position {position} holds '{actual}', not '{expected}'"
    SHUFFLE_SEED_REQUIRED = "A shuffle seed is required while shuffling"

    # Time/Date Validation Errors
    TIMEZONE_REQUIRED_UTC_DATETIME = "UtcDateTime requires a timezone-aware datetime"
    DATETIME_REQUIRED = "Expected an ISO 8601 datetime string or datetime"

    # Settings Validation Errors
    INVALID_DATABASE_URL = "Database URL must start with sqlite://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # Authentication/Security Errors
    MISSING_BEARER_TOKEN = "Missing bearer token"
    UNKNOWN_BEARER_TOKEN = "Unknown bearer token"
    CONTAINER_NOT_FOUND = "Container not found on application state"

    # HTTP Errors
    INTERNAL_ERROR = "Internal server error"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Database Lifecycle
    DATABASE_INITIALIZED = "Database initialized at %s"
    DATABASE_CLOSED = "Database manager closed"
    DATABASE_STATS_FAILED = "Failed to collect database stats: %s"
    DATABASE_OPERATION_FAILED = "Database operation failed: %s"

    # Service Lifecycle
    SERVICE_STARTING = "Starting music streaming player (environment=%s)"
    SERVICE_LISTENING = "Serving HTTP API on %s:%s"
    SERVICE_STOPPED = "Service stopped"
    SERVICE_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    SERVICE_FATAL_ERROR = "Fatal error: %s"
    CONTAINER_INITIALIZED = "Container initialized (environment=%s)"
    CONTAINER_SHUTDOWN = "Container shut down"

    # Queue Resolution
    QUEUE_RESOLVED = "Resolved %s for user %s in %s/%s: %s"
    QUEUE_BOUNDARY = "Reached %s for user %s in %s/%s"
    SHUFFLE_SEED_MINTED = "Minted shuffle seed for user %s in %s/%s"
    QUEUE_RESHUFFLED = "Reshuffled %s/%s on repeat-all wrap"

    # History
    HISTORY_RECORDED = "Recorded play of %s for user %s"

    # Catalog
    TRACK_SAVED = "Saved track %s"
    CONTEXT_SAVED = "Saved context %s/%s with %s tracks"
    CONTEXT_DELETED = "Deleted context %s/%s"

    # Access
    ACCESS_DENIED = "Denied %s to user %s (role=%s)"
    AUTH_REJECTED = "Rejected request: %s"

    # HTTP
    DOMAIN_ERROR_RESPONSE = "%s %s -> %s (%s)"
    INTERNAL_VALIDATION_FAILED = "%s %s failed validating internal data: %s"
