"""Shared utilities for dragreorder."""
