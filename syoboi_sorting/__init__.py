"""
syoboi-sorting - Rangement des enregistrements TV par programme.

Ce package recupere la liste des titres de programmes depuis l'API
Syoboi Calendar, parcourt un repertoire local et deplace les fichiers
dont le nom contient un titre dans un sous-repertoire "<TID> <Titre>".

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs)
- services/ : Couche application (tri, orchestration)
- adapters/ : Couche infrastructure (CLI, client API, systeme de fichiers)
"""

__version__ = "1.0.0"
