"""
Tests for the storefront backend.
"""
