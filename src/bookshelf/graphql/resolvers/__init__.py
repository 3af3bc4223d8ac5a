"""Resolver package for the GraphQL schema.

Each resolver takes the GraphQL ``info`` (and, for field resolvers, the typed
parent), issues one document store call through ``info.context["store"]``,
and converts the stored record into its GraphQL type.
"""
