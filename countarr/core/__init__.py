"""
Couche domaine (core).

Contient les objets valeur de qualite des releases.
Cette couche n'a AUCUNE dependance vers l'infrastructure (CLI, configuration, logs).

Sous-packages :
- value_objects/ : Objets valeur immutables (Resolution, QualitySource, ParsedQuality)
"""
