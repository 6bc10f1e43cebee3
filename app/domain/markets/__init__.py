"""
Markets bounded context — domain layer.

Entities, errors, and ports for listing and looking up prediction markets.
"""
