"""
Test suite for bounded-variables

Contains:
- tests/unit/          : Unit tests for range/domain algebra, monitors, variables
"""
