"""Allow running the console with ``python -m db_console``."""

from db_console.cli.main import main

if __name__ == "__main__":
    main()
