"""
Shared Kernel

Value objects, the domain error taxonomy and small API helpers shared
by the listings, reservations and favorites contexts.
"""
