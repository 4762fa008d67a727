"""Tests for relaykit.utils."""
