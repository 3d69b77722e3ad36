"""
Root conftest.py - makes the in-tree chromashift package importable.

This conftest is loaded by pytest before any test collection begins, so the
suite also runs from a plain checkout without ``pip install -e .``.
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
