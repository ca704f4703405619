import sys

from bisaya.cli import main

sys.exit(main())
