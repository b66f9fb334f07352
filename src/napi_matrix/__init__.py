"""Build matrix generation for cross-platform Node-API native modules."""

__version__ = "0.1.0"
