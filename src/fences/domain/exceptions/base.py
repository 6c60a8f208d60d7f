"""Base exceptions for fences domain."""


class FencesError(Exception):
    """Root exception for all fences errors.

    All domain exceptions inherit from this.
    Allows catching all fences-specific errors.
    """
