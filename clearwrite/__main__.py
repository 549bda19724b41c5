import sys

from clearwrite.cli import main

sys.exit(main())
