"""Balancer protocol configuration and constants."""

BALANCER_VERSION = 2
