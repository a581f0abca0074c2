"""Test suite for esconv.

Unit tests cover input resolution, the derived-metric adapters and
each conversion; integration tests cover table conversion and CSV
output. To run the tests, execute `pytest` from the project root.
"""
