"""Make the in-tree ``gridls`` package importable without installing it.

The subprocess tests in ``test_end_to_end.py`` pass the same root through
``PYTHONPATH``.
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = str(Path(__file__).resolve().parent.parent)

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
