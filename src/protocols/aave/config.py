"""Aave protocol configuration and constants."""

# Protocol version integrated against
AAVE_VERSION = 3
