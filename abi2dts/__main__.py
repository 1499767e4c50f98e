import sys

from .abi2dts import main

if __name__ == '__main__':
    sys.exit(main())
