"""
HTTP interface for the markets bounded context.
"""
