import sys

from src.pontos.cli import main

sys.exit(main())
