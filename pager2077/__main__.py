"""Main entry point for running the pager as a module.

This allows running with: python -m pager2077
"""

from .app import run

if __name__ == "__main__":
    run()
