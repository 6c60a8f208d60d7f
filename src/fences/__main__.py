"""Allow ``python -m fences``."""

from fences.presentation.cli import main

raise SystemExit(main())
