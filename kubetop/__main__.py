"""Allow ``python -m kubetop``."""

from kubetop.cli import main

raise SystemExit(main())
