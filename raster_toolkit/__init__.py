"""
Raster Toolkit - pixel filters, PPM codec and programmatic images.
"""

__version__ = "1.0.0"
