"""Integration tests spanning table input, conversion and output."""
