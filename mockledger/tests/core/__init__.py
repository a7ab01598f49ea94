"""Unit tests for the mockledger core engine."""
