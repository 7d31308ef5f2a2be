"""
Shared module package.

Contains cross-cutting concerns used across the gateway:
- Response envelope
- Error classification and mapping
- Request context middleware and rate limiting
- Logging configuration
"""
