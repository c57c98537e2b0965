"""Entry point for running the salary slip command line."""

import sys

from salary_slip.cli import main

if __name__ == "__main__":
    sys.exit(main())
