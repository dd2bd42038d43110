import sys

from eighty_twenty.main import main

sys.exit(main())
