import sys

from prefixtree.cli import main

sys.exit(main())
