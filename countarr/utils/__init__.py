"""Utilitaires et constantes partages de Countarr."""
