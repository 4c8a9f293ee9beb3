"""
=============================================================================
LOGGING CONFIGURATION
=============================================================================

The status table itself is fixed at build time and has nothing to
configure. What callers can tune is how much this package logs and in what
shape, following the usual precedence:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. Explicit arguments                                             │
    │      └── LoggingConfig(log_level="DEBUG")                           │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── HTTPSTATUS_LOG_LEVEL=DEBUG                                 │
    │                                                                      │
    │   3. Default values (in this dataclass)                             │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class LoggingConfig:
    """
    Configuration for the ``httpstatus`` logger.

    Development:
        LoggingConfig(log_level="DEBUG")     # see every lookup miss

    Production:
        LoggingConfig(log_format="json")     # one JSON object per line
    """

    log_level: str = "WARNING"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG - Registry construction and every lookup miss
    WARNING - Quiet; the package has nothing to say at this level
    """

    log_format: str = "text"
    """
    Log format: 'json' or 'text'.
    JSON is better for log aggregators (ELK, Datadog).
    Text is better for human reading.
    """

    logger_name: str = "httpstatus"
    """Logger that handlers are attached to. Child modules propagate to it."""

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """
        Create configuration from environment variables.

        HTTPSTATUS_LOG_LEVEL   Logging level (default: WARNING)
        HTTPSTATUS_LOG_FORMAT  'text' or 'json' (default: text)
        """
        return cls(
            log_level=os.getenv("HTTPSTATUS_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("HTTPSTATUS_LOG_FORMAT", "text"),
        )

    def validate(self) -> None:
        """Validate configuration values, failing fast with a clear message."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}."
            )

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"Invalid log_format: {self.log_format}. Must be 'text' or 'json'.")

        if not self.logger_name:
            raise ValueError("logger_name must not be empty")
