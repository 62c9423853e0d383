"""gastos - weekly expense tracking against a fixed budget."""

__version__ = "0.1.0"
