"""Allow `python -m dbug`."""

import sys

from dbug.cli import main

sys.exit(main())
