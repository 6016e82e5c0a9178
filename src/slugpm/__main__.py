"""Allow running slugpm as ``python -m slugpm``."""

from slugpm.cli import cli_main

if __name__ == "__main__":
    cli_main()
