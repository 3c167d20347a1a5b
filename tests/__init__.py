# tests/__init__.py
"""
Test suite for lexdb.

Every test that touches files works on the miniature dictionary built by
the `mini_wordnet` fixture in conftest.py; nothing reads a system install.
"""
