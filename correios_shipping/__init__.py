"""
Correios real-time shipping rates.

Turns a cart into one carrier-compliant parcel (plus a multiplier), asks the
Correios price/lead-time service for quotes and ranks the answers into
checkout shipping options.
"""
__version__ = "1.0.0"
