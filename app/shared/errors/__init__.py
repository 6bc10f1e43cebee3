"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors
escaping a route are consistently translated into API responses.
"""
