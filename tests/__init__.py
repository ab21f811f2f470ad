"""
Test suite for number-list

Contains:
- tests/unit/          : Unit tests for individual modules
"""
