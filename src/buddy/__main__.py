"""Allow ``python -m buddy``."""

from .cli import main

main()
