"""
LMS bounded context: domain layer.

This module contains the domain model for the Moodle user-management context:
- User, created-user and site status entities
- The tagged error hierarchy consumed by the error classifier
- The port the application layer delegates to
"""
