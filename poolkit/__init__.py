"""Thread pools, object and connection pools, packet framing and small networking utilities."""

__version__ = "0.1.0"