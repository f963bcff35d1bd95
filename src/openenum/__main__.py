"""Allow running openenum as ``python -m openenum``."""

from openenum.cli import main

if __name__ == "__main__":
    main()
