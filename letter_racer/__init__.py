"""Letter Racer: catch the letters of a target word as they stream past the line."""

__version__ = "0.1.0"
