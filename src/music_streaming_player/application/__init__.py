"""
Application Layer

Contains use cases and command/query handlers.
This layer orchestrates domain objects and infrastructure to fulfill use cases.

Structure:
- commands/: CQRS write operations (AdvanceTrackCommand, RecordPlayCommand, ...)
- queries/: CQRS read operations (GetHistoryQuery, GetContextQuery, ...)
- interfaces/: Port interfaces for infrastructure adapters
"""
