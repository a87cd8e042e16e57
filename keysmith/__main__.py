"""
Keysmith Module Entry Point
=============================

Allows running the Keysmith CLI via: python -m keysmith
"""

from keysmith.cli import main

if __name__ == "__main__":
    main()
