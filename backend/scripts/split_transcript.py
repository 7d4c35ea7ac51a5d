#!/usr/bin/env python3
"""
Split Transcript Script
=======================
Command-line wrapper around transcript_split.cli for running from a checkout.

Usage:
    python scripts/split_transcript.py --input transcript.json --mode sentence
    python scripts/split_transcript.py --input transcript.json --mode time --max-duration 20
    python scripts/split_transcript.py --list-modes
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from transcript_split.cli import main


if __name__ == '__main__':
    sys.exit(main())
