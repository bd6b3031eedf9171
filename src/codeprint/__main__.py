import sys

from codeprint.app import main

if __name__ == "__main__":
    sys.exit(main())
