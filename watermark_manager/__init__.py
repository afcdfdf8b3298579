"""
Watermark Manager
Interactive tool that stamps a text or image watermark onto a picture and
optionally brightens, contrasts, desaturates or inverts it first.
"""

__version__ = "1.0.0"
