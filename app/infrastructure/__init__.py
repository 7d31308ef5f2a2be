"""
Infrastructure layer package.

Concrete adapters of the domain port. The only external system is Moodle.
"""
