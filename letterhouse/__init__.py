"""Letter house: windows full of letters that open after Christmas."""

__version__ = "0.1.0"
