"""Core of volbright: parsing, locking, probing and rendering."""
