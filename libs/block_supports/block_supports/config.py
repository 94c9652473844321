"""
Configuration block_supports : lue depuis l'environnement au chargement.
"""
import os

ELEMENTS_CLASS_PREFIX = os.getenv("BLOCK_SUPPORTS_CLASS_PREFIX", "wp-elements-")
STYLE_CONTEXT         = os.getenv("BLOCK_SUPPORTS_STYLE_CONTEXT", "block-supports")
LOG_LEVEL             = os.getenv("LOG_LEVEL", "INFO")
