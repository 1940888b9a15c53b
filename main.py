# main.py
import sys

from campus_nav.cli import main

if __name__ == "__main__":
    sys.exit(main())
