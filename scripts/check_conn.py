#!/usr/bin/env python
"""
Check Connection Script
Runs the connection probe from a source checkout.

Usage:
    PGPASSWORD=... python scripts/check_conn.py -h db.example.com -d app -U alice
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pg_check_conn.app import run


if __name__ == '__main__':
    run()
