"""Entry point for `python -m chatmands`."""

import sys

from .main import main

sys.exit(main())
