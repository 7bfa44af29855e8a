"""Electricity consumption records for the districts, streets and houses of a city, with a command-script protocol and command line."""

__version__ = "0.1.0"
__all__ = ["city", "protocol", "cli"]