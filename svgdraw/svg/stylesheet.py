"""Stylesheet parsing and class → style cascade resolution.

Only flat ``selector { prop: val; ... }`` rules are understood. Resolution for a
class name tries, in order:

    1. the class itself (``.a`` and ``a`` are stored under ``a``)
    2. ``*.<class>``
    3. ``text.<class>``
    4. an alias registered by any other ``<parent>.<class>`` selector
    5. a fresh empty style, cached by the resolver
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from svgdraw.svg.style import StyleAttributes

logger = logging.getLogger(__name__)

_RULE_RE = re.compile(r"([*\w\-.]+)\s*\{([^}]*)\}")

_FALLBACK_PREFIXES = ("*.", "text.")


class StyleSheet:
    """Selector → StyleAttributes, fixed once parsing is done.

    Dotted selectors (``path.a``) are also reachable through an alias keyed by
    their last component (``a``). The alias shares the instance, so a change
    made through either key is visible through both.
    """

    def __init__(
        self,
        rules: Mapping[str, StyleAttributes] | None = None,
        aliases: Mapping[str, StyleAttributes] | None = None,
    ) -> None:
        self._rules: dict[str, StyleAttributes] = dict(rules or {})
        self._aliases: dict[str, StyleAttributes] = dict(aliases or {})

    def __contains__(self, selector: str) -> bool:
        return selector in self._rules

    def __getitem__(self, selector: str) -> StyleAttributes:
        return self._rules[selector]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def selectors(self) -> list[str]:
        return list(self._rules)

    def alias(self, name: str) -> StyleAttributes | None:
        return self._aliases.get(name)

    def lookup(self, class_name: str) -> StyleAttributes | None:
        """Cascade lookup without the empty-style fallback."""
        if class_name in self._rules:
            return self._rules[class_name]
        for prefix in _FALLBACK_PREFIXES:
            style = self._rules.get(prefix + class_name)
            if style is not None:
                return style
        return self._aliases.get(class_name)

    def as_dict(self) -> dict[str, dict[str, str]]:
        return {selector: dict(style.raw) for selector, style in self._rules.items()}


def _selector_key(selector: str) -> str:
    return selector[1:] if selector.startswith(".") else selector


def parse_stylesheet(blocks: Iterable[str]) -> StyleSheet:
    """Build a StyleSheet from raw ``<style>`` contents.

    Repeated selectors merge; later declarations override earlier ones.
    """
    rules: dict[str, StyleAttributes] = {}
    aliases: dict[str, StyleAttributes] = {}
    for block in blocks:
        for m in _RULE_RE.finditer(block):
            key = _selector_key(m.group(1).strip())
            style = rules.get(key)
            if style is None:
                style = rules[key] = StyleAttributes()
                parent, dot, child = key.rpartition(".")
                if dot and parent and child:
                    aliases.setdefault(child, style)
            style.append(m.group(2))
    logger.debug("Parsed stylesheet: %d selectors, %d aliases", len(rules), len(aliases))
    return StyleSheet(rules, aliases)


class StyleResolver:
    """Resolves class names against a StyleSheet, caching every answer.

    Misses produce an empty style which is cached here, never in the sheet.
    The cache is not locked; use one resolver per thread.
    """

    def __init__(self, sheet: StyleSheet) -> None:
        self.sheet = sheet
        self._cache: dict[str, StyleAttributes] = {}

    def get(self, class_name: str) -> StyleAttributes:
        style = self._cache.get(class_name)
        if style is None:
            style = self.sheet.lookup(class_name)
            if style is None:
                style = StyleAttributes()
            self._cache[class_name] = style
        return style

    @property
    def cached(self) -> dict[str, StyleAttributes]:
        return dict(self._cache)
