"""
License Guardian
Administrative helpers for Microsoft Entra ID license assignments

- Base64 string encoding and decoding
- Text to CSV conversion
- License assignment reports (direct, group-inherited, or both)
- Throttled removal of directly assigned licenses
- SKU part number to product name lookup
"""

__version__ = "0.1.0"
__author__ = "Identity Operations Team"
