"""Solutions to classic array, searching, bit, arithmetic and pattern exercises."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "basics", "bits", "patterns", "searching"]