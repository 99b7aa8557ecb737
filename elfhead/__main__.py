"""
ElfHead Module Entry Point
===========================

Allows running the ElfHead CLI via: python -m elfhead
"""

from elfhead.cli import main

if __name__ == "__main__":
    main()
