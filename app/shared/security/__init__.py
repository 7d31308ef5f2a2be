"""
Request protection: per-client rate limiting.
"""
