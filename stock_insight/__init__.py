"""Stock Insight - envanter analitiği ve AI danışman."""

__version__ = "0.1.0"
