import sys
from pathlib import Path

from hypothesis import settings

# Make the src/ layout importable without an editable install.
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# No on-disk example store: property runs stay stateless across sessions.
settings.register_profile("ghstache-tests", database=None)
settings.load_profile("ghstache-tests")
