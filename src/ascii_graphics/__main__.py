"""Allow ``python -m ascii_graphics``."""

from ascii_graphics.cli.main import main

main()
