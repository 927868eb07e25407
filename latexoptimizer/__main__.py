import sys

from latexoptimizer.cli import main

sys.exit(main())
