"""Service layer for business logic.

Services keep routes thin and focused on HTTP handling:
- Payload to model mapping in one place per entity
- Not-found handling on top of the repositories (services.crud)
- Orchestration of multiple repositories (team drivers, race results)

Layer hierarchy:
    Routes (HTTP) -> Services (Business Logic) -> Repositories (Database)

Services should NOT:
- Directly execute SQL queries (use repositories)
- Know about HTTP request/response details
- Return Pydantic schema objects (routes do the conversion)
"""
