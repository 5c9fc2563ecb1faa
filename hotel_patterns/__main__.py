import sys

from hotel_patterns.cli import main

if __name__ == "__main__":
    sys.exit(main())
