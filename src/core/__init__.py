"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (fichiers JSON, CLI).

Sous-packages :
- entities/ : Entités métier (Book, Movie, Series, Season, Review, ReviewInfo)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- exceptions : Erreurs métier (validation, persistance, introuvable)
"""
