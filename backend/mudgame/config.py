"""
Game configuration.

Override these settings with environment variables. Numeric settings are
read by the CLI options that use them, so a bad value is reported as a
usage error instead of breaking the import.
"""

import os

# World data (empty means the bundled scenario)
WORLD_FILE = os.getenv("MUDGAME_WORLD_FILE") or None

# Logging
LOG_LEVEL = os.getenv("MUDGAME_LOG_LEVEL", "WARNING").upper()

# Random seed (unset means a fresh, unpredictable game every run)
SEED_ENV = "MUDGAME_SEED"

# Map size in characters
MAP_COLS_ENV = "MUDGAME_MAP_COLS"
MAP_ROWS_ENV = "MUDGAME_MAP_ROWS"
MAP_COLS = 40
MAP_ROWS = 14
