"""Allow running the package with ``python -m classdoc``."""

from classdoc.cli import main

raise SystemExit(main())
