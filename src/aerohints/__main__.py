import sys

from aerohints.cli import main


if __name__ == "__main__":
	sys.exit(main())
