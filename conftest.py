# Ensure the package under src/ is importable during tests without installing the package.
from pathlib import Path
import os
import sys

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

# GUI specs run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
