"""Daily profit challenge tracker.

Record one account value per calendar day and compare progress against a
compounding (percent per day) or fixed-amount-per-day goal curve.
"""

__version__ = "0.1.0"
