"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et la hiérarchie d'erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, systeme de fichiers, CLI).

Sous-packages :
- entities/ : Entités métier (CatalogEntry)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors : Exceptions du domaine
"""
