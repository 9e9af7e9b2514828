"""
Entry point for running the CLI as a module.

Usage:
    python -m zkpret_api serve
"""

from zkpret_api.cli import main

if __name__ == "__main__":
    main()
