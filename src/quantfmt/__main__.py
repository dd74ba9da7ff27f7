import sys

from quantfmt.cli.main import main

sys.exit(main())
