import sys

from rapid_ini.demo import main

if __name__ == "__main__":
    sys.exit(main())
