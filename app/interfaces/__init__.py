"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas, and the query
adapter that turns raw request input into use-case calls.
No business logic belongs here.
"""
