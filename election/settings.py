"""Application settings.

The only environment variables read are the logging overrides below; the
election itself takes no configuration from the environment.
"""

import os
from pathlib import Path

# Logging
LOG_LEVEL = os.getenv("ELECTION_LOG_LEVEL", "WARNING")
LOG_DIR = Path(os.getenv("ELECTION_LOG_DIR", "logs"))

# Interface
BANNER = "=== ONLINE VOTING SYSTEM (INDIAN ELECTIONS) ==="
