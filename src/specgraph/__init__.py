"""specgraph: consistency engine for cross-referencing specification documents."""

__version__ = "0.1.0"
