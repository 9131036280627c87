import sys

from minirack.repl import main

sys.exit(main())
