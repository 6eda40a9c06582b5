"""Allow running knf as ``python -m knf``."""

from .cli import main

if __name__ == "__main__":
    main()
