"""Generate random base64 text samples and count the English letters and other bytes in them."""

__version__ = "0.1.0"