"""
Carnet - Catalogue personnel de livres, films et séries.

Ce package fournit les fonctionnalités pour cataloguer ses lectures et
visionnages, les évaluer (note de 0 à 5 et commentaire), les rechercher,
les filtrer et les trier par note. Chaque catalogue est un fichier JSON.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (validation, requêtes, bibliothèque)
- infrastructure/ : Persistance JSON des catalogues
- adapters/ : Couche interface (CLI)
"""
