import sys

from mdtree.cli import main

sys.exit(main())
