"""
Test suite for exact complex arithmetic

Contains:
- tests/unit/          : Unit tests for individual modules
"""
