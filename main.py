#!/usr/bin/env python3
"""
Chatmands - chat command grammar and dispatch

Development entry point, runs the CLI straight from the source tree.
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from chatmands.main import main as cli_main


def main() -> int:
    """Main entry point for Chatmands."""
    try:
        return cli_main()
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
