import sys

from bas_atlas.cli import main

if __name__ == "__main__":
    sys.exit(main())
