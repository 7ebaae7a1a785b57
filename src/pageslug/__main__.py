import sys

from pageslug.cli import main

sys.exit(main())
