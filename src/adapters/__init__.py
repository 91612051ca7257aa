"""
Couche adaptateurs.

Les adaptateurs exposent les services et catalogues aux surfaces externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
