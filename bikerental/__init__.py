"""Console bike rental shop: inventory, customers, rentals and per-second billing."""

__version__ = "1.0.0"