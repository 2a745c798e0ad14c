#!/usr/bin/env python3
"""
EVM Approvals - script entry point (same as the ``evm-approvals`` console script).

Usage:
    python main.py approve
    python main.py --verbose check --target uniswap-v3-all
"""

import sys
import os

# Add the project root to the path BEFORE importing local modules
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from evm_approvals.main import main

if __name__ == '__main__':
    sys.exit(main())
