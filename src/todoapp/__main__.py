"""Allow ``python -m todoapp``."""

from todoapp.cli import main

if __name__ == "__main__":
    main()
