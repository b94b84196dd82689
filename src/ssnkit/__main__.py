import sys

from ssnkit.cli import main

sys.exit(main())
