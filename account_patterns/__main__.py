"""Allow ``python -m account_patterns``."""
import sys

from account_patterns.cli.main import main

sys.exit(main())
