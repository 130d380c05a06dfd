"""
Test suite for poui

Contains:
- tests/unit/          : Unit tests for widths, arithmetic, float conversion and the value model
"""
