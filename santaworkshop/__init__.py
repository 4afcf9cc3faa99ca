"""Santa's workshop: children's letters, gift budgets and delivery routes."""

__version__ = "0.1.0"