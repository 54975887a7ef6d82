# -*- coding: utf-8 -*-
"""
Shared test setup.
"""
import os
import sys
import tempfile
from pathlib import Path

# Must be set before QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="blockcast-logs-"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
