"""
Couche infrastructure de Movies API.

Ce module contient les implémentations concrètes des interfaces définies
dans la couche domaine (ports) :

- persistence/ : Stockage SQLite avec SQLModel (modèles et repositories)

Architecture hexagonale : les repositories implémentent les ports du domaine,
permettant de changer de base sans modifier la logique métier.
"""
