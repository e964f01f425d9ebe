"""Term Atlas - TF-IDF clustering and force-directed layout for term maps."""

__version__ = "0.1.0"
