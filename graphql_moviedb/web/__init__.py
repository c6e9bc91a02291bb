"""Interface web : application ASGI exposant le endpoint GraphQL."""
