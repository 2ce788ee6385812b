import sys
from pathlib import Path

# Make ``pyharmony`` importable from a source checkout without installing it
SRC_DIR = Path(__file__).resolve().parent / "src"
if SRC_DIR.is_dir() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))
