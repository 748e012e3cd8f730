"""
function_queue Configuration

Environment configuration for error namespacing and logging.
"""

import os
from dataclasses import dataclass


@dataclass
class FunctionQueueConfig:
    """Main configuration container."""

    # Namespace attached to errors raised by FunctionQueue
    error_namespace: str = "FunctionQueue"

    # Default level for setup_logging()
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FunctionQueueConfig":
        """Load configuration from environment variables."""
        return cls(
            error_namespace=os.getenv("FUNCTION_QUEUE_ERROR_NAMESPACE", "FunctionQueue"),
            log_level=os.getenv("FUNCTION_QUEUE_LOG_LEVEL", "INFO").upper(),
        )


# Global config instance
config = FunctionQueueConfig.from_env()
