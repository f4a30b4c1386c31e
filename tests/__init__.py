"""
Test suite for vote-odds

Contains:
- tests/unit/          : Unit tests for individual modules
"""
