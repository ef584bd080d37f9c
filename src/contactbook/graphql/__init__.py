"""
GraphQL API package
"""
