"""
graphql-moviedb - Façade GraphQL de l'API The Movie Database (TMDB).

Les requêtes et mutations GraphQL (films, séries, personnes, listes, compte)
sont traduites en appels REST vers TMDB v3/v4, et les réponses snake_case
sont remises en forme dans le graphe d'objets camelCase du schéma.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (conventions de nommage, normalisation, détails)
- adapters/ : Couche infrastructure (clients REST TMDB, schéma GraphQL)
- web/ : Application ASGI (FastAPI)
"""

__version__ = "0.1.0"
