"""
HTTP interface of the LMS bounded context.
"""
