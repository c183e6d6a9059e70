import sys

from .run_train import main

sys.exit(main())
