"""Test configuration for ensuring package imports."""

import os
import sys

# Make ``wastewise_bot`` importable when pytest is run from a checkout without
# installing the package first.
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
