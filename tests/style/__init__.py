"""Tests for style values."""
