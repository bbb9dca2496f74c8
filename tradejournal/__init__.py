"""Trade journal analytics.

Turns raw trade, strategy, checklist and psychology records into the
aggregated metrics shown on a trading journal dashboard.
"""

__version__ = "0.1.0"
