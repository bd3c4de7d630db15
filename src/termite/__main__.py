"""Allow running the CLI with ``python -m termite``."""

from termite.cli.main import main

if __name__ == "__main__":
    main()
