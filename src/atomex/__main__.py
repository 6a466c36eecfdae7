"""Allow ``python -m atomex``."""

from .cli.main import main

if __name__ == "__main__":
    main()
