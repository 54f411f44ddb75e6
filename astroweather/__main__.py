import sys

from astroweather.cli import main

sys.exit(main())
