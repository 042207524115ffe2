"""
============================

Trading Exchange Adapters.

============================

This package contains adapter implementations for cryptocurrency exchanges.
Adapters translate exchange-specific response formats into the normalized
trading models defined in the model package.

"""
