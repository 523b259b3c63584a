import sys

from combsort.cli import main

sys.exit(main())
