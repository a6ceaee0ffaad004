"""HTTP API for the QuickPOS terminal."""
