"""
Moodle Gateway: a uniform HTTP API over Moodle user-management web services.

Application package root. A small hexagonal (ports & adapters) service:
every endpoint answers with the same {code, message, data} envelope.

Bounded contexts:
    - lms: Status check, user creation, lookup, bulk update, sync, role assignment.

Layers:
    - domain: Entities, the Moodle port (ABC), the tagged error hierarchy.
    - application: One use case per operation, DTOs.
    - infrastructure: The Moodle REST adapter implementing the port.
    - interfaces: FastAPI routers, Pydantic schemas, request binding.
    - shared: Envelope, error classification, middleware, logging.
"""
