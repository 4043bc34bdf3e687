"""Allow ``python -m merge_images``."""

import sys

from merge_images.cli import main

sys.exit(main())
