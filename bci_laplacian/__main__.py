import sys

from bci_laplacian.cli import main

sys.exit(main())
