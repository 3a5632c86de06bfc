"""
Test suite for random-multiply

Contains:
- tests/unit/          : Unit tests for individual modules
"""
