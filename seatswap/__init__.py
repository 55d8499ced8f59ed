"""
seatswap - listing classification and matching engine for a seat-swap marketplace.
"""

__version__ = "1.0.0"
