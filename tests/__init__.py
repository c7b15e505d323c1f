"""
Test suite for the box value type

Contains:
- tests/unit/          : Unit tests for individual modules
"""
