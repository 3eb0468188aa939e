import sys

from weighted_autocompleter.cli import main

sys.exit(main())
