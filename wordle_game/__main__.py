import sys

from wordle_game.wordle import main

sys.exit(main())
