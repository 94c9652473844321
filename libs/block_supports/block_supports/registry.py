"""
Registry des types de blocs : nom + `supports` déclarés.

Sert uniquement à savoir si un bloc sérialise lui-même ses styles
(`__experimentalSkipSerialization`), auquel cas le support générique
ne doit rien injecter.
"""
import logging
import re
from typing import Any, Dict, List, Optional

from .errors import BlockTypeRegistrationError
from .schemas import BlockType

log = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"^[a-z0-9-]+/[a-z0-9-]+$")

# Blocs core pré-enregistrés (supports couleur des éléments)
_CORE_BLOCK_TYPES: Dict[str, dict] = {
    "core/paragraph": {"color": {"link": True, "gradients": True}},
    "core/heading":   {"color": {"link": True, "gradients": True}},
    "core/group":     {"color": {"link": True, "button": True, "heading": True, "gradients": True}},
    "core/buttons":   {"color": {"gradients": True}},
    "core/button":    {"color": {"gradients": True, "__experimentalSkipSerialization": True}},
    "core/columns":   {"color": {"link": True, "button": True, "heading": True, "gradients": True}},
    "core/column":    {"color": {"link": True, "button": True, "heading": True, "gradients": True}},
}


class BlockTypeRegistry:
    """
    Registry en mémoire des types de blocs.

    Usage:
        >>> registry = BlockTypeRegistry()
        >>> registry.register("acme/card", supports={"color": {"link": True}})
        >>> registry.get_registered("acme/card").supports["color"]["link"]
        True
    """

    def __init__(self):
        self._types: Dict[str, BlockType] = {}

    def register(
        self,
        name: str,
        supports: Optional[Dict[str, Any]] = None,
        title: Optional[str] = None,
    ) -> BlockType:
        if not isinstance(name, str) or not _NAME_PATTERN.match(name):
            raise BlockTypeRegistrationError(
                f"Nom de bloc invalide : {name!r} (attendu 'namespace/slug' en minuscules)"
            )
        if name in self._types:
            raise BlockTypeRegistrationError(f"Bloc déjà enregistré : {name!r}")

        block_type = BlockType(name=name, title=title, supports=supports or {})
        self._types[name] = block_type
        log.debug("Bloc %s enregistré", name)
        return block_type

    def unregister(self, name: str) -> BlockType:
        if name not in self._types:
            raise BlockTypeRegistrationError(f"Bloc inconnu : {name!r}")
        return self._types.pop(name)

    def get_registered(self, name: Optional[str]) -> Optional[BlockType]:
        if not name:
            return None
        return self._types.get(name)

    def is_registered(self, name: Optional[str]) -> bool:
        return self.get_registered(name) is not None

    def get_all_registered(self) -> List[BlockType]:
        return list(self._types.values())


_DEFAULT_REGISTRY: dict = {}


def get_default_registry() -> BlockTypeRegistry:
    """Registry partagé du process, initialisé avec les blocs core (lazy)."""
    if "default" not in _DEFAULT_REGISTRY:
        registry = BlockTypeRegistry()
        for name, supports in _CORE_BLOCK_TYPES.items():
            registry.register(name, supports=supports)
        _DEFAULT_REGISTRY["default"] = registry
    return _DEFAULT_REGISTRY["default"]


def should_skip_serialization(
    block_type: Optional[BlockType],
    feature_set: str,
    feature: Optional[str] = None,
) -> bool:
    """
    Indique si le bloc gère lui-même la sérialisation d'un support.

    `supports[feature_set]["__experimentalSkipSerialization"]` :
      - liste  → True si `feature` y figure
      - bool   → s'applique à toutes les features du set
    """
    if block_type is None or not feature_set:
        return False

    feature_supports = block_type.supports.get(feature_set)
    if not isinstance(feature_supports, dict):
        return False

    skip = feature_supports.get("__experimentalSkipSerialization", False)
    if isinstance(skip, (list, tuple)):
        return feature in skip
    return bool(skip)
