"""Listings app package.

This app encapsulates everything related to rentable listings: the
listing model, query-string filters, cursor pagination and the guarded
create/update/delete services used by the API.
"""
