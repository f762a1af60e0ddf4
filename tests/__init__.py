"""
Test suite for hexstring

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
