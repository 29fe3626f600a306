"""
Shared Kernel

Value objects, error kinds and store helpers used by every app of the
rental catalog. Nothing in here knows about rooms, vehicles or bookings.
"""
