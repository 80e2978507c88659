"""Rode-method transport ingredients: band data readers, band evaluation, Fermi level and scattering terms."""

__version__ = "1.0.0"