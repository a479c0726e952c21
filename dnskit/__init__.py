"""DNS record types, reverse-lookup names and zone file parsing."""

__version__ = "0.1.0"