import sys

from .cli.args import main

sys.exit(main())
