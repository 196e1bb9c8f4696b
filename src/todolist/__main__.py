"""Entry point for running as a module: python -m todolist"""

import sys

from todolist.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
