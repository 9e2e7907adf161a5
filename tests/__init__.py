"""
Test suite for the model normalizer

Contains:
- tests/unit/          : Unit tests for individual modules and the pipeline driver
"""
