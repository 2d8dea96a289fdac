#!/usr/bin/env python3
"""
Entry point for running mfsuite as a Python module.

This allows users to run: python -m mfsuite [options]
"""

import sys

from mfsuite.cli import main

if __name__ == "__main__":
    sys.exit(main())
