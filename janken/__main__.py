import sys

from janken.cli import main

sys.exit(main())
