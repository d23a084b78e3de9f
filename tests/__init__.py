"""
Test suite for exprbuf

Contains:
- tests/unit/          : Unit tests for individual modules
"""
