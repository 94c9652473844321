"""
TagProcessor : édition lexicale des balises ouvrantes d'un fragment HTML.

Le tokenizer `html.parser` de la stdlib sert uniquement à localiser les
balises ouvrantes (commentaires, doctype, <script> ignorés). Aucun DOM n'est
construit : seules les balises modifiées sont réécrites, le reste du
fragment est recopié octet pour octet.

Usage:
    >>> tags = TagProcessor('<p id="a">Hello</p>')
    >>> tags.next_tag()
    True
    >>> tags.add_class("wp-elements-1")
    True
    >>> tags.get_updated_html()
    '<p class="wp-elements-1" id="a">Hello</p>'
"""
import re
from html import escape, unescape
from html.parser import HTMLParser
from typing import Dict, List, NamedTuple, Optional

_TAG_NAME = re.compile(r"<[a-zA-Z][^\s/>]*")
_ATTRIBUTE = re.compile(
    r"""(?P<name>[^\s"'>/=]+)"""
    r"""(?:\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<uq>[^\s"'=<>`]+)))?"""
)


class _StartTag(NamedTuple):
    start: int
    name: str
    raw: str


class _StartTagCollector(HTMLParser):
    def __init__(self):
        super().__init__()
        self.found: List[tuple] = []

    def handle_starttag(self, tag, attrs):
        lineno, offset = self.getpos()
        self.found.append((lineno, offset, tag, self.get_starttag_text()))


def _collect_start_tags(html: str) -> List[_StartTag]:
    collector = _StartTagCollector()
    collector.feed(html)
    collector.close()

    # getpos() → (ligne, colonne) ; conversion en offset absolu
    line_starts = [0] + [m.end() for m in re.finditer("\n", html)]
    return [
        _StartTag(start=line_starts[lineno - 1] + offset, name=tag, raw=raw)
        for lineno, offset, tag, raw in collector.found
    ]


def _find_attribute(raw: str, name: str) -> Optional[re.Match]:
    """Premier attribut `name` (insensible à la casse) d'une balise brute."""
    head = _TAG_NAME.match(raw)
    pos = head.end() if head else 1
    for match in _ATTRIBUTE.finditer(raw, pos):
        if match.group("name").lower() == name:
            return match
    return None


def _attribute_value(match: re.Match) -> str:
    for group in ("dq", "sq", "uq"):
        if match.group(group) is not None:
            return match.group(group)
    return ""


class TagProcessor:
    """Curseur sur les balises ouvrantes d'un fragment HTML."""

    def __init__(self, html: str):
        self._html = html or ""
        self._tags = _collect_start_tags(self._html)
        self._cursor = -1
        self._updates: Dict[int, str] = {}

    def next_tag(self, tag_name: Optional[str] = None, class_name: Optional[str] = None) -> bool:
        """Avance jusqu'à la prochaine balise ouvrante correspondante."""
        wanted = tag_name.lower() if tag_name else None
        for idx in range(self._cursor + 1, len(self._tags)):
            self._cursor = idx
            if wanted and self._tags[idx].name != wanted:
                continue
            if class_name and not self.has_class(class_name):
                continue
            return True
        self._cursor = len(self._tags)
        return False

    def _current(self) -> Optional[str]:
        if 0 <= self._cursor < len(self._tags):
            return self._updates.get(self._cursor, self._tags[self._cursor].raw)
        return None

    def get_tag(self) -> Optional[str]:
        if self._current() is None:
            return None
        return self._tags[self._cursor].name.upper()

    def class_list(self) -> List[str]:
        raw = self._current()
        if raw is None:
            return []
        match = _find_attribute(raw, "class")
        if match is None:
            return []
        return unescape(_attribute_value(match)).split()

    def has_class(self, name: str) -> bool:
        return name in self.class_list()

    def add_class(self, name: str) -> bool:
        """
        Ajoute une classe à la balise courante.

        - sans attribut class → ` class="…"` inséré juste après le nom de balise
        - avec attribut class → classe ajoutée en fin de valeur (sans doublon)
        Retourne False si aucune balise n'est sélectionnée.
        """
        raw = self._current()
        if raw is None:
            return False
        if self.has_class(name):
            return True

        match = _find_attribute(raw, "class")
        if match is None:
            head = _TAG_NAME.match(raw)
            cut = head.end() if head else len(raw) - 1
            updated = f'{raw[:cut]} class="{escape(name)}"{raw[cut:]}'
        else:
            value = _attribute_value(match)
            if match.group("dq") is None:
                value = value.replace('"', "&quot;")
            value = value.rstrip()
            value = f"{value} {escape(name)}" if value.strip() else escape(name)
            updated = f'{raw[:match.start()]}class="{value}"{raw[match.end():]}'

        self._updates[self._cursor] = updated
        return True

    def get_updated_html(self) -> str:
        """Fragment d'origine avec les balises modifiées réinjectées."""
        if not self._updates:
            return self._html

        parts = []
        pos = 0
        for idx in sorted(self._updates):
            tag = self._tags[idx]
            parts.append(self._html[pos:tag.start])
            parts.append(self._updates[idx])
            pos = tag.start + len(tag.raw)
        parts.append(self._html[pos:])
        return "".join(parts)

    def __str__(self) -> str:
        return self.get_updated_html()
