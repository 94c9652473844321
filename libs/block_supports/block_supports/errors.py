"""Exceptions block_supports."""


class BlockSupportsError(Exception):
    """Erreur de base du module."""


class BlockTypeRegistrationError(BlockSupportsError, ValueError):
    """Nom de bloc invalide, déjà enregistré ou inconnu."""
