"""
Infrastructure layer package.

Adapters implementing domain ports against real IO (databases).
"""
