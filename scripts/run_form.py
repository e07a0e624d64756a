#!/usr/bin/env python3
"""
Form entrypoint - launches the Textual registration form (.env is read by src.core.config).
"""

import sys
from pathlib import Path

# Add project root to path for imports (src/, tui/ and util/ are all in project root)
sys.path.insert(0, str(Path(__file__).parent.parent))

from tui.main import main

if __name__ == "__main__":
    main()
