"""
Infrastructure adapters for Moodle.

Each adapter implements a domain port and talks to a Moodle site
through its web-service layer.
"""
