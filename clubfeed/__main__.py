import sys

from clubfeed.cli import main

sys.exit(main())
