import sys

from termstatus.demo import main

sys.exit(main())
