import sys

from distill.main import main

sys.exit(main())
