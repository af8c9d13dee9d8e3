#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import pathlib
import argparse

# Put this folder on sys.path so `core` and `ui` import when run from anywhere.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

def cli():
    parser = argparse.ArgumentParser(description="FlowPad flowchart builder")
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    parser.add_argument(
        "--truncate",
        action="store_true",
        help="Start with long labels truncated to 20 characters."
    )
    args = parser.parse_args()

    from app import main
    return main(verbosity=args.verbosity, stdexp=args.stdexp, truncate=args.truncate)

if __name__ == "__main__":
    sys.exit(cli())
