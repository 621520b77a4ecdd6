#!/usr/bin/env python3
"""
notepane - local notes with rich-text formatting

Simple usage:
    python notes.py new "Groceries"          # Create a note
    python notes.py list --search milk       # Find notes
    python notes.py format 3fa2 checklist    # Turn a note into a checklist
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from notepane.cli import app

if __name__ == "__main__":
    app()
