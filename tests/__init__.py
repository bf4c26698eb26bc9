"""Test package (fakes and fixtures shared across test modules)."""
