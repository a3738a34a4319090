import sys

from contrastlab.main import main

sys.exit(main())
