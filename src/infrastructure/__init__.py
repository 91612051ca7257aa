"""
Couche infrastructure de Carnet.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports). Il gere les preoccupations techniques :

- persistence/ : Stockage des catalogues en fichiers JSON (un par type de media)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: SQLite au lieu de JSON)
sans modifier la logique metier.
"""
