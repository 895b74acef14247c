"""labbook — client for the lab equipment booking and inventory backend."""

__version__ = "1.0.0"
