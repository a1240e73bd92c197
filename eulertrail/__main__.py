"""Allow ``python -m eulertrail``."""

from eulertrail.cli import main

if __name__ == "__main__":
    main()
