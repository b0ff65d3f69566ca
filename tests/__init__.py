"""
Test package for the sdfgen module.

This package contains tests for all components of the sdfgen module,
organized into subdirectories that mirror the structure of the main package.

Subdirectories:
- core: Tests for the distance transform stages and the blender

To run all tests:
    python -m unittest discover -s tests -t .

To run tests in a specific directory:
    python -m unittest discover -s tests/core -t .
"""

import sys
from pathlib import Path

# Add the project root to the path for proper imports
# This allows tests to be run from any directory
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))
