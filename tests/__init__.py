"""
Test suite for polyroots

Contains:
- tests/unit/          : Unit tests for individual modules
"""
