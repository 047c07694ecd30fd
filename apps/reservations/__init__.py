"""Reservations app package.

A reservation books a date range of a listing for a guest. The listing
search uses reservations to hide listings that are busy on the requested
dates, and guests or hosts can cancel them.
"""
