"""
Domain layer package.

Entities, the port to Moodle and the errors every failure is expressed in.
No framework imports, no IO.
"""
