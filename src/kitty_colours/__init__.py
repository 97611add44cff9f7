"""kitty-colours -- apply base16 PuTTY themes to KiTTY sessions."""

__version__ = '0.1.0'
