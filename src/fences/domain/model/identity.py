"""Display form of file identities."""

from __future__ import annotations

import os
from pathlib import PurePath


def render_identity(identity: str, display_root: PurePath | str | None) -> str:
    """Render identity for messages.

    Absolute identities are shown relative to display_root; relative paths and
    unresolved specifiers are shown unchanged.

    Examples:
        render_identity("/repo/src/a.py", "/repo") → "src/a.py"
        render_identity("requests", "/repo") → "requests"
    """
    if display_root is None or not os.path.isabs(identity):
        return identity
    try:
        return os.path.relpath(identity, display_root)
    except ValueError:
        # different drive on Windows
        return identity
