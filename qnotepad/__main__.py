"""
QNotepad entry point.

Usage:
    python -m qnotepad
"""

import sys


def main() -> int:
    """Main entry point for QNotepad."""
    from qnotepad.app import run_app
    return run_app(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
