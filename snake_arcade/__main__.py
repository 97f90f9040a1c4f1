import sys

from snake_arcade.app import main

sys.exit(main())
