"""Favorites app package.

Server side of the heart button (favorite / unfavorite a listing) and
the client-side optimistic toggle that drives it.
"""
