"""
Shared error handling package.

Centralizes error classification and error-to-envelope mapping so that
domain errors and binding failures are consistently translated into
API responses.
"""
