"""Tests for relaykit.oracle."""
