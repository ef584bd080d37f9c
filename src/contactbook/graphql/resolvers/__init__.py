"""
GraphQL resolvers package
"""

# Resolvers are imported lazily from the query and mutation roots.
