"""
Source-Checkout Runner
======================
`python run.py` prints the result of the shipped two-segment example without
`pip install`. The package lives under src/, which is not importable from the
repository root, so that directory is put first on the import path before the
driver is imported.
"""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from segmentintersection.main import main

if __name__ == "__main__":
    main()
