"""
MAGAZINE — front magazine rendu côté serveur.
Articles, tags et blocs de contenu flexibles lus depuis Directus (GraphQL).

Démarrer : uvicorn magazine.api.main:app --reload --port 8001
"""

__version__ = "1.0.0"
