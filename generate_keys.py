"""Print a fresh RSA key pair as SPRING or UNIX style key=value lines."""

import sys

from keyseed.cli import main


if __name__ == "__main__":
    sys.exit(main())
