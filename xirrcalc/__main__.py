"""Allow ``python -m xirrcalc``."""

from .app import main

main()
