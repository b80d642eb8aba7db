"""Bundled static resources."""
