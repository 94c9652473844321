"""
Style engine : objets de style d'éléments → règles CSS.

Pipeline :
  get_styles({"color": {"text": "var:preset|color|red"}}, selector=".x a", context="block-supports")
    → déclarations {"color": "var(--wp--preset--color--red)"}
    → règle ajoutée au StyleStore "block-supports"
  get_store("block-supports").get_stylesheet()  →  ".x a{color:var(--wp--preset--color--red);}"

Les presets ne sont pas résolus ici : la référence `var:preset|…` est
simplement réécrite en custom property CSS.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

# (chemin dans l'objet de style, propriété CSS)
_COLOR_PROPERTIES: List[Tuple[Tuple[str, str], str]] = [
    (("color", "text"),       "color"),
    (("color", "background"), "background-color"),
    (("color", "gradient"),   "background"),
]

_PRESET_PREFIX = "var:"


def compile_value(value: Any) -> str:
    """`var:preset|color|vivid-red` → `var(--wp--preset--color--vivid-red)`."""
    if not isinstance(value, str):
        return str(value)
    if value.startswith(_PRESET_PREFIX):
        parts = value[len(_PRESET_PREFIX):].split("|")
        return f"var(--wp--{'--'.join(parts)})"
    return value


def compile_css(declarations: Mapping[str, str], selector: Optional[str] = None) -> str:
    body = "".join(f"{prop}:{value};" for prop, value in declarations.items())
    if selector:
        return f"{selector}{{{body}}}" if body else ""
    return body


class StyleStore:
    """Règles CSS d'un contexte (selector → déclarations, ordre d'insertion)."""

    def __init__(self, name: str):
        self.name = name
        self._rules: Dict[str, Dict[str, str]] = {}

    def add_rule(self, selector: str, declarations: Mapping[str, str]) -> None:
        if not declarations:
            return
        self._rules.setdefault(selector, {}).update(declarations)

    def get_rules(self) -> Dict[str, Dict[str, str]]:
        return {selector: dict(decls) for selector, decls in self._rules.items()}

    def get_stylesheet(self) -> str:
        return "\n".join(compile_css(decls, selector) for selector, decls in self._rules.items())

    def reset(self) -> None:
        self._rules.clear()


_STORES: Dict[str, StyleStore] = {}


def get_store(name: str) -> StyleStore:
    """Store partagé du process pour un contexte (créé à la demande)."""
    if name not in _STORES:
        _STORES[name] = StyleStore(name)
    return _STORES[name]


def get_styles(
    style: Optional[Mapping[str, Any]],
    selector: Optional[str] = None,
    context: Optional[str] = None,
    store: Optional[StyleStore] = None,
) -> dict:
    """
    Convertit un objet de style en déclarations CSS.

    Si `selector` et un store (explicite ou via `context`) sont fournis,
    la règle y est enregistrée.

    Returns:
        {"declarations": {...}, "css": "..."} : dict vide si aucun style
    """
    if not isinstance(style, Mapping):
        return {}

    declarations: Dict[str, str] = {}
    for (group, key), prop in _COLOR_PROPERTIES:
        section = style.get(group)
        if isinstance(section, Mapping) and section.get(key) is not None:
            declarations[prop] = compile_value(section[key])

    if not declarations:
        return {}

    if selector:
        target = store if store is not None else (get_store(context) if context else None)
        if target is not None:
            target.add_rule(selector, declarations)

    return {"declarations": declarations, "css": compile_css(declarations, selector)}
