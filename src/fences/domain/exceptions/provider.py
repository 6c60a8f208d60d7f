"""Module graph provider exceptions."""

from fences.domain.exceptions.base import FencesError


class ProviderError(FencesError):
    """A module graph provider failed to read a source file.

    Attributes:
        identity: File identity that failed
        reason: Why it failed
    """

    def __init__(self, identity: str, reason: str) -> None:
        if not identity:
            raise ValueError("identity must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.identity = identity
        self.reason = reason
        super().__init__(f"Failed to collect imports of {identity}: {reason}")
