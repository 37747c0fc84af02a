import sys
from pathlib import Path

# Make the src/ layout and the shared fakes importable without installation.
_TESTS = Path(__file__).resolve().parent
for _p in (_TESTS.parent / "src", _TESTS):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))
