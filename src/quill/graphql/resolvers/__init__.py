"""Resolver package for GraphQL schema.

Each resolver takes the request's ``AuthContext`` explicitly and opens its own
database session; the root query and mutation types wire them to fields.
"""

# Intentionally empty; functions are defined in sibling modules.
