"""
Pytest configuration file for worldsmith tests.
"""

import os

# Settings are read once on first import; keep the application's own engine
# in memory and skip the sample campaign while testing.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DATABASE", "false")
