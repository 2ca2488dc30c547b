"""Turn techniques from a master markdown document into Ghost articles."""

__version__ = "0.1.0"
