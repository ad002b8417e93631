"""Core constants and exceptions for tdconv."""
