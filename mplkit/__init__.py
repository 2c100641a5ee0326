"""Token-metadata helpers: error lookup, error-table generation, spinners, indexer queries and snapshot files."""

__version__ = "0.1.0"