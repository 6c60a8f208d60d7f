"""Configuration exceptions."""

from fences.domain.exceptions.base import FencesError


class ConfigurationError(FencesError):
    """Layer or project configuration cannot be used.

    Raised before any classification runs. Never reported as a diagnostic.

    Attributes:
        source: Where the configuration came from (file path or label)
        reason: Why it was rejected
    """

    def __init__(self, source: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not source:
            raise ValueError("source must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")
