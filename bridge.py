#!/usr/bin/env python3
"""
lwdita-bridge - LwDITA <-> ProseMirror document tree converter

Simple usage:
    python bridge.py to-editor topic.json        # Outputs topic-editor.json
    python bridge.py to-source topic-editor.json # Outputs topic-editor-source.json
    python bridge.py check /folder/path          # Round-trips every source file
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from lwdita_bridge.cli import app

if __name__ == "__main__":
    app()
