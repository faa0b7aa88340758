import sys

from bfi.cli import main

sys.exit(main())
