"""
Interface GraphQL (strawberry).

- types : types objets, unions, enums et entrees du schema
- schema : requetes (Query) et mutations (Mutation)
- context : contexte par operation (clients TMDB, token utilisateur)
- errors : classification et formatage des erreurs
- router : endpoint FastAPI
"""

from graphql_moviedb.adapters.graphql.schema import schema

__all__ = ["schema"]
