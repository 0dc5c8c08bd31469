import sys

from flappy.game import main

sys.exit(main())
