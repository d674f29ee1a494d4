"""
Test suite for rational-lattice

Contains:
- tests/unit/          : Unit tests for individual modules
"""
