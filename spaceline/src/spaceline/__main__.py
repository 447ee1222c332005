"""Run the Spaceline CLI with ``python -m spaceline``."""

from spaceline.cli.app import main

if __name__ == "__main__":
    main()
