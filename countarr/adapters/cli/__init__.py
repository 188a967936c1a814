"""Interface en ligne de commande de Countarr (Typer + Rich)."""
