"""
Test suite for sizehint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
