"""Tests for relaykit.relay."""
