"""Run with: python -m autosnapper_server"""

import sys

from autosnapper_server.main import main

if __name__ == '__main__':
    sys.exit(main())
