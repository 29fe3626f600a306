"""Listings app package.

Rental listings of two kinds: rooms rented per month and vehicles rented
per day, together with the predicate filter engine that narrows them.
"""
