# Versions should comply with PEP440.
__version__ = "0.1.0"
