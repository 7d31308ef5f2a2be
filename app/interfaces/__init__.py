"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request schemas and request binding.
No business logic belongs here.
Routes call use cases and return response envelopes.
"""
