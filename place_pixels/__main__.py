import sys

from place_pixels.cli import main

sys.exit(main())
