"""
Adaptateurs d'infrastructure pour Countarr.

- cli/ : Interface en ligne de commande (Typer + Rich)
"""
