"""Offline tests of the storefront UI framework."""
