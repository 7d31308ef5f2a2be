"""
Application layer for the LMS bounded context.

Use cases coordinate the Moodle port to fulfill the six gateway
operations. No framework or infrastructure imports allowed.
"""
