"""Entry point for ``python -m matheval``."""

from matheval.cli import main

if __name__ == "__main__":
    main()
