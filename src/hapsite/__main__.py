"""Allow ``python -m hapsite``."""

from hapsite.cli import main

if __name__ == "__main__":
    main()
