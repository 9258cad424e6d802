"""Allow running as `python -m lotto_cli`."""

import sys

from .cli import main

sys.exit(main())
