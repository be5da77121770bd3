"""Unit test suite for propgen."""
