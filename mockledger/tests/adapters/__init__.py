"""Tests for reporting adapters."""
