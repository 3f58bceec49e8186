"""Core alias generation and folder list handling."""
