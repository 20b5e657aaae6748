#!/usr/bin/env python3
"""
beacon - leveled console logging

Thin wrapper around the package CLI:
- `python main.py emit --level warn "disk nearly full"`
- `python main.py levels`
"""

from beacon.cli import run

if __name__ == "__main__":
    run()
