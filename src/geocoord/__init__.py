"""
geocoord - unified coordinate parsing and conversion.

This package turns coordinate text written as decimal degrees, DMS, UTM
or MGRS into WGS84 locations, and encodes locations back to MGRS.
"""

__version__ = "0.1.0"
