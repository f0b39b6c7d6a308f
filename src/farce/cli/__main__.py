"""Main entry point for farce CLI when run as a module."""

from farce.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
