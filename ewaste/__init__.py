"""Track electronic devices from purchase through recycling."""

__version__ = "0.1.0"
