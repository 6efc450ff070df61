"""
Domain Layer

This package contains the parsing logic organized by domain area.
Domain services implement core algorithms but do not handle request I/O.

Domains:
- schema: XSD to element tree conversion
"""
