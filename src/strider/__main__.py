"""Allow running Strider with ``python -m strider``."""

from strider.cli import main

if __name__ == "__main__":
    main()
