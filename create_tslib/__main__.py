"""Allow ``python -m create_tslib``."""

from create_tslib.cli import main

if __name__ == "__main__":
    main()
