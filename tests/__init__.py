"""Tests for blockstyle."""
