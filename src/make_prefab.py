#!/usr/bin/env python3
"""
Script to run the prefab toolkit commands.
This is a thin wrapper around the prefab_kit package.
"""

import sys
from prefab_kit.cli import main

if __name__ == '__main__':
    sys.exit(main())
