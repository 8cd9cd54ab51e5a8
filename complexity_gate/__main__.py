"""Package entry point: ``python -m complexity_gate``."""

import sys

from complexity_gate.cli import main

if __name__ == "__main__":
    sys.exit(main())
