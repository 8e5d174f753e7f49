"""Allow `python -m layercheck`."""

import sys

from layercheck.presentation.cli import main

sys.exit(main())
