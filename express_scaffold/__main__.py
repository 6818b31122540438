"""Allow ``python -m express_scaffold``."""

import sys

from express_scaffold.project import main

sys.exit(main())
