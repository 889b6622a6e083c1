"""genecache: warm the dictyBase content cache for a list of genes."""

__version__ = "1.0.0"
