"""
Test support utilities for lifecycle-manager tests.

Helpers that don't fit as pytest fixtures but are shared across test files.
"""
