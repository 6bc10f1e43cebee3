"""
Market Query Service — read-only HTTP API over prediction markets.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - markets: Listing markets with filters and fetching a market by ID.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases.
    - infrastructure: SQL adapter implementing the market repository port.
    - interfaces: FastAPI routers, Pydantic schemas, the query adapter.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
