#!/usr/bin/env python3
"""
Portsweep - concurrent TCP connect scanner

Scans every target against a port range or an explicit port list with a
fixed pool of workers, grabbing a banner from each open port.

Usage:
    python portsweep.py --targets 10.0.0.1,10.0.0.2 --start-port 20 --end-port 25
    python portsweep.py --targets example.com --ports 22,80,443 --json
"""

import sys

from portsweep.main import main

if __name__ == "__main__":
    sys.exit(main())
