"""Sales tax receipts for shopping baskets."""

__version__ = "0.1.0"
