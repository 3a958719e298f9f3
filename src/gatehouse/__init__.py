"""Gatehouse - email/password login and signup service.

Layers:
- domain: User aggregate and repository interfaces
- application: ports and the login/signup use cases
- infrastructure: bcrypt, JWT, email validation and SQLAlchemy adapters
- presentation: transport-independent routers, FastAPI app and CLI
"""
