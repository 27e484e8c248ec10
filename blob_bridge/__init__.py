"""blob-bridge: a scriptable facade over Azure Blob Storage."""

__version__ = "0.1.0"
