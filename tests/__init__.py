"""
Test suite for column_indenter.

Run all tests:
  python -m pytest tests/ -v
"""
