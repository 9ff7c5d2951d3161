import sys

from dirdedupe.cli import main

sys.exit(main())
