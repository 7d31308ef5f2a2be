"""
Stable machine-readable response codes.

Structured Moodle exceptions add their own error codes on top of these,
passed through verbatim.
"""

OK = "OK"
INVALID_PARAMS = "INVALID_PARAMS"
INVALID_REQUEST = "INVALID_REQUEST"
INVALID_REQUEST_BODY = "INVALID_REQUEST_BODY"
DATA_NOT_FOUND = "DATA_NOT_FOUND"
USER_SYNC_FAILED = "USER_SYNC_FAILED"
USER_ASSIGN_FAILED = "USER_ASSIGN_FAILED"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
