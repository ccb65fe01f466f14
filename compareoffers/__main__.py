import sys

from compareoffers.cli import main

sys.exit(main())
