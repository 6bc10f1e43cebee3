"""
Application layer for the markets bounded context.

Read-only use cases over the market repository port.
"""
