"""Allow ``python -m loadws``."""

from loadws.cli import main

if __name__ == "__main__":
    main()
