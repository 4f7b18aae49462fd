import sys

from rankboard.cli import main

sys.exit(main())
