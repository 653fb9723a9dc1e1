"""Edwards curve arithmetic, extension fields and Tate and ate pairings."""

__version__ = "0.1.0"