"""cnab-rows: positional search over CNAB 240 remittance files."""

__version__ = "0.1.0"
