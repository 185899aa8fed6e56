"""Arbitrage odds dashboard backend.

Fetches bookmaker odds, detects surebets and sizes the stakes.
Advisory only: no bets are placed.
"""

__version__ = "1.0.0"
