"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports.py et
fournissent les implementations concretes pour les systemes externes.

Sous-packages :
- api/ : Clients de l'API REST TMDB (v3, v4), cache et sessions
- graphql/ : Schema GraphQL (types, requetes, mutations), contexte, erreurs

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
