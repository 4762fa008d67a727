"""Tests for relaykit.fees."""
