"""A small model of a shopping mall: people, products, stores, and a text menu for adding stores."""

__version__ = "0.1.0"
__all__ = ["people", "products", "stores", "mall", "ui"]