"""
Application layer package.

Each use case is a single class with one public ``execute`` method.
This layer depends on the domain port, never on infrastructure.
"""
