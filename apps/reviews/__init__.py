"""Reviews app package.

Star ratings and comments left on rooms and vehicles, and the rating
aggregator that summarizes them per item.
"""
