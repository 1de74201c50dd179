import sys

from deathsgame.main import main

sys.exit(main())
