"""Packaged standardization tables, one subpackage per version."""
