"""Allow ``python -m home_booking`` to run the command line."""

import sys

from home_booking.app.cli import main


if __name__ == "__main__":
    sys.exit(main())
