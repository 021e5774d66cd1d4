import sys

from meteoswiss.cli import main

sys.exit(main())
