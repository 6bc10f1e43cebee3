"""
Infrastructure adapters for the markets bounded context.
"""
