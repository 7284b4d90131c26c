"""
Adaptateur CLI (Typer + Rich).

- helpers : console partagee, injection du container, affichage des deplacements
- commands/ : commandes sort et catalog
"""
