"""Folio - personal investment ledger and accounting engine."""

__version__ = "0.1.0"
