"""Client for part of the DNSimple v2 HTTP API and parser for its webhook events."""

__version__ = "0.1.0"