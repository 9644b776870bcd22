"""Salon Manager: domain store, reporting and a thin HTTP/CLI surface."""

__version__ = "1.0.0"
