"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et le type
d'erreur de l'application. Cette couche n'a AUCUNE dépendance vers
l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (CatalogEntry, Rating, DetailView, ...)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors.py : AppError et ErrorKind
"""
