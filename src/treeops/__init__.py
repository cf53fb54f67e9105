"""treeops - filesystem tree operations for build tooling."""

__version__ = "0.1.0"
