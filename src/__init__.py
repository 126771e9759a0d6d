"""
Movies API - API REST en lecture seule sur un catalogue de films.

Ce package expose le catalogue (listes paginées, fiche détaillée) et agrège
pour chaque film la note du service de notes local et la note Rotten Tomatoes
fournie par OMDb.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, erreurs)
- services/ : Couche application (cas d'utilisation, orchestration)
- adapters/ : Clients HTTP des sources de notes
- infrastructure/ : Persistance SQLite (SQLModel)
- web/ : Application FastAPI
"""
