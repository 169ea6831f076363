"""Personal-commitment registry: one objective per address, plus optional priority and deadline."""

__version__ = "0.1.0"
