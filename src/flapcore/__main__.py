import sys

from flapcore.main import main

sys.exit(main())
