"""Allow ``python -m hl7slice``."""

import sys

from hl7slice.cli import main

sys.exit(main())
