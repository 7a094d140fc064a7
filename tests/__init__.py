"""
Test suite for typed angles

Contains:
- tests/unit/          : Unit tests for individual modules and rotation scenarios
"""
