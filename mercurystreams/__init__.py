"""Int192 value encoding, report validation, parsed observations and market-status consensus for price reports."""

__version__ = "0.1.0"