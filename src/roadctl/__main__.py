"""Allow ``python -m roadctl``."""

from roadctl.cli import main

main()
