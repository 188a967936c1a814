"""
Couche application (services).

- quality_parser : classification des titres de release
- quality_scorer : score de qualite pondere
- quality_stats : agregation statistique d'un lot de titres
"""
