"""
Support "elements" : classe unique par instance de bloc pour styler ses
sous-éléments (liens, boutons, titres).

Deux usages :

1. En une passe, sur le HTML rendu :
    >>> render_elements_support('<p>Hi <a href="#">x</a></p>', {
    ...     "blockName": "core/paragraph",
    ...     "attrs": {"style": {"elements": {"link": {"color": {"text": "red"}}}}},
    ... })
    # → '<p class="wp-elements-<md5>">Hi <a href="#">x</a></p>'

2. En deux phases (pipeline de rendu) :
    render_elements_support_styles(block)        → CSS enregistré + attrs.className
    render_elements_class_name(html, block)      → classe injectée dans le HTML

L'identifiant est un md5 du bloc sérialisé : les deux phases calculent la
même classe pour un même bloc.
"""
import hashlib
import json
import logging
import re
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from . import config
from .registry import BlockTypeRegistry, get_default_registry, should_skip_serialization
from .schemas import BlockLike, as_block_dict
from .style_engine import StyleStore, get_store, get_styles
from .tag_processor import TagProcessor

log = logging.getLogger(__name__)

_HEADING_LEVELS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_COLOR_KEYS = ["text", "background", "gradient"]

# Chemins (dans attrs.style.elements) qui déclenchent l'ajout de la classe
ELEMENT_COLOR_PATHS: Dict[str, List[Tuple[str, ...]]] = {
    "button": [("button", "color", key) for key in _COLOR_KEYS],
    "link": [
        ("link", "color", "text"),
        ("link", ":hover", "color", "text"),
    ],
    "heading": (
        [("heading", "color", key) for key in _COLOR_KEYS]
        + [(level, "color", key) for level in _HEADING_LEVELS for key in _COLOR_KEYS]
    ),
}


# ── Helpers ─────────────────────────────────────────────────────────────────

def _get_path(data: Any, path: Sequence[str]) -> Any:
    node = data
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node


def _element_styles(block: Mapping) -> Optional[Mapping]:
    elements = _get_path(block, ("attrs", "style", "elements"))
    return elements if isinstance(elements, Mapping) and elements else None


def _skip_options(block: Mapping, registry: BlockTypeRegistry) -> Dict[str, dict]:
    block_type = registry.get_registered(block.get("blockName"))
    return {
        family: {"skip": should_skip_serialization(block_type, "color", family)}
        for family in ELEMENT_COLOR_PATHS
    }


def _skips_all(options: Mapping[str, dict]) -> bool:
    return all(opt.get("skip") for opt in options.values())


def _element_selectors(class_name: str) -> Dict[str, dict]:
    scope = f".{class_name}"
    return {
        "button": {
            "selector": f"{scope} .wp-element-button, {scope} .wp-block-button__link",
        },
        "link": {
            "selector":       f"{scope} a:where(:not(.wp-element-button))",
            "hover_selector": f"{scope} a:where(:not(.wp-element-button)):hover",
        },
        "heading": {
            "selector": ", ".join(f"{scope} {level}" for level in _HEADING_LEVELS),
            "elements": _HEADING_LEVELS,
        },
    }


# ── API publique ────────────────────────────────────────────────────────────

def get_elements_class_name(block: BlockLike) -> str:
    """`wp-elements-<md5>` calculé sur le bloc sérialisé (clés triées)."""
    payload = json.dumps(as_block_dict(block), sort_keys=True, separators=(",", ":"), default=str)
    return config.ELEMENTS_CLASS_PREFIX + hashlib.md5(payload.encode("utf-8")).hexdigest()


def should_add_elements_class_name(block: BlockLike, options: Optional[Mapping[str, dict]] = None) -> bool:
    """
    True si au moins un style couleur d'élément est défini pour une famille
    (button / link / heading) non marquée `skip` dans `options`.
    """
    elements = _element_styles(as_block_dict(block))
    if not elements:
        return False

    options = options or {}
    for family, paths in ELEMENT_COLOR_PATHS.items():
        if options.get(family, {}).get("skip"):
            continue
        for path in paths:
            if _get_path(elements, path) is not None:
                return True
    return False


def render_elements_support(
    block_content: str,
    block: BlockLike,
    registry: Optional[BlockTypeRegistry] = None,
) -> str:
    """
    Ajoute la classe `wp-elements-<id>` sur la balise racine du HTML rendu
    quand le bloc déclare des couleurs d'éléments.

    Les classes et attributs existants sont conservés ; sans attribut class,
    celui-ci est inséré juste après le nom de balise. Le HTML interne n'est
    jamais modifié. Sans style d'élément, le HTML est retourné tel quel.
    """
    if not block_content:
        return block_content

    block = as_block_dict(block)
    if not _element_styles(block):
        return block_content

    options = _skip_options(block, registry or get_default_registry())
    if _skips_all(options):
        log.debug("Sérialisation couleur gérée par %s : rien à injecter", block.get("blockName"))
        return block_content

    if not should_add_elements_class_name(block, options):
        return block_content

    tags = TagProcessor(block_content)
    if not tags.next_tag():
        return block_content

    class_name = get_elements_class_name(block)
    tags.add_class(class_name)
    log.debug("Classe %s ajoutée sur <%s> (%s)", class_name, tags.get_tag(), block.get("blockName"))
    return tags.get_updated_html()


def render_elements_support_styles(
    block: BlockLike,
    registry: Optional[BlockTypeRegistry] = None,
    store: Optional[StyleStore] = None,
) -> dict:
    """
    Phase pré-rendu : enregistre les règles CSS des éléments et ajoute la
    classe générée à `attrs.className`.

    Args:
        block: bloc parsé (non modifié)
        registry: registry des types de blocs (défaut : registry partagé)
        store: store CSS cible (défaut : store du contexte configuré)

    Returns:
        Copie du bloc, avec `attrs.className` complété si nécessaire
    """
    parsed = deepcopy(as_block_dict(block))
    elements = _element_styles(parsed)
    if not elements:
        return parsed

    options = _skip_options(parsed, registry or get_default_registry())
    if _skips_all(options) or not should_add_elements_class_name(parsed, options):
        return parsed

    class_name = get_elements_class_name(parsed)

    attrs = dict(parsed.get("attrs") or {})
    existing = attrs.get("className")
    attrs["className"] = f"{existing} {class_name}" if existing else class_name
    parsed["attrs"] = attrs

    target = store if store is not None else get_store(config.STYLE_CONTEXT)
    for family, cfg in _element_selectors(class_name).items():
        if options[family]["skip"]:
            continue

        style_object = elements.get(family)
        if isinstance(style_object, Mapping):
            get_styles(style_object, selector=cfg["selector"], store=target)
            hover = style_object.get(":hover")
            if "hover_selector" in cfg and isinstance(hover, Mapping):
                get_styles(hover, selector=cfg["hover_selector"], store=target)

        for element in cfg.get("elements", []):
            get_styles(elements.get(element), selector=f".{class_name} {element}", store=target)

    log.debug("Styles éléments enregistrés pour %s (%s)", class_name, parsed.get("blockName"))
    return parsed


def render_elements_class_name(block_content: str, block: BlockLike) -> str:
    """
    Phase post-rendu : reporte la classe `wp-elements-*` présente dans
    `attrs.className` sur la balise racine du HTML.
    """
    if not block_content:
        return block_content

    class_string = _get_path(as_block_dict(block), ("attrs", "className"))
    if not isinstance(class_string, str):
        return block_content

    match = re.search(rf"\b{re.escape(config.ELEMENTS_CLASS_PREFIX)}\S+\b", class_string)
    if not match:
        return block_content

    tags = TagProcessor(block_content)
    if tags.next_tag():
        tags.add_class(match.group(0))
    return tags.get_updated_html()
