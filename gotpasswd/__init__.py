"""
gotpasswd
Random password generator drawing from named ASCII character classes.
"""

__version__ = "0.1.0"
