import sys

from mdscaffold.main import main

sys.exit(main())
