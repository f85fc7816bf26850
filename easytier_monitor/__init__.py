"""Web server and JSON API for the state of an EasyTier network, with parsers for the CLI's output."""

__version__ = "0.1.0"