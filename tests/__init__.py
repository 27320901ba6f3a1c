"""
Test suite for the Gilded Rose inventory engine.

Run tests:
    pytest
"""
