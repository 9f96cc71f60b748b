"""Run the CLI with ``python -m fountainkit.cli``."""

from fountainkit.cli.main import main

main()
