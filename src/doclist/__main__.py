"""Allow ``python -m doclist``."""

from doclist.cli.main import main

raise SystemExit(main())
