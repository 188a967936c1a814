"""
Countarr - Statistiques des services de gestion multimedia.

Ce package fournit le classificateur de qualite des titres de release :
resolution, source, codecs, drapeaux HDR/Dolby Vision/Atmos, score de
qualite et groupe de release, ainsi que leur agregation statistique.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur)
- services/ : Couche application (classification, score, statistiques)
- adapters/ : Couche infrastructure (CLI)
"""

__version__ = "0.1.0"
