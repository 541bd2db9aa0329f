"""Test suite for pysatl-sampling."""
