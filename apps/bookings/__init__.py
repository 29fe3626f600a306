"""Bookings app package.

Room and vehicle bookings: price quotes, confirmation with a mocked
payment, status lifecycle and upcoming/past bucketing.
"""
