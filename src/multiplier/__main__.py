import sys

from src.multiplier.cli import main

sys.exit(main())
