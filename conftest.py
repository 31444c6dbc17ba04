# SPDX-FileCopyrightText: 2025 threshold-recovery contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so the package imports without installation
#   • THRESHOLD_RECOVERY_* variables cleared so the default policy applies

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))

for _name in [name for name in os.environ if name.startswith("THRESHOLD_RECOVERY_")]:
    del os.environ[_name]
