"""
================================================================================
Locator Registry
================================================================================

Maps semantic element names (locator keys) to selector expressions for one
page family, and builds Playwright locators from them.

Features:
    - Two interchangeable selector dialects (short CSS / structural XPath)
    - Composition: the shared navigation set is injected, not inherited
    - Eager initialization per bound page; full re-initialization on rebind
    - Dynamic locators with safely quoted run-time parameters
    - Fail-fast resolution errors (no silent null locators)

Locator set format:
    STATIC:  key -> {dialect_name: selector}
    DYNAMIC: key -> {dialect_name: template with {value} placeholder}

    where dialect_name is "short" or "structural".

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

from loguru import logger
from playwright.async_api import Locator, Page

from .errors import LocatorResolutionError
from .selectors import Selector, SelectorKind, render_template


LocatorDefinition = Mapping[str, str]


class MatchPolicy(str, Enum):
    """How many of the matched elements a locator addresses."""
    FIRST = "first"
    ALL = "all"


@dataclass(frozen=True)
class LocatorSet:
    """
    Declarative locator definitions for one page family.

    Attributes:
        name: Page family name used in logs and error messages
        static: Keys resolved once per bind
        dynamic: Keys resolved per call with a run-time parameter
    """
    name: str
    static: Mapping[str, LocatorDefinition]
    dynamic: Mapping[str, LocatorDefinition] = field(default_factory=dict)

    def keys(self) -> List[str]:
        return [*self.static.keys(), *self.dynamic.keys()]


class LocatorRegistry:
    """
    Resolves locator keys of a page family against one Playwright page.

    Static keys use MatchPolicy.ALL by default (the raw locator, suitable
    for counting rows); dynamic keys use MatchPolicy.FIRST by default.

    Usage:
        >>> common = LocatorRegistry(page, COMMON_LOCATORS)
        >>> cart = LocatorRegistry(page, CART_LOCATORS, common=common)
        >>> await cart.locator("cart_rows").count()
        >>> await cart.locator("line_item_price", "MacBook Pro").text_content()
        >>> cart.resolve("navbar_cart")     # served by the injected common set
    """

    def __init__(
        self,
        page: Page,
        locator_set: LocatorSet,
        common: Optional["LocatorRegistry"] = None,
        dialect: Optional[SelectorKind] = None,
    ):
        """
        Initialize and eagerly bind the registry.

        Args:
            page: Playwright Page to build locators on
            locator_set: Page family definitions
            common: Registry of shared elements consulted for keys not
                declared by this set
            dialect: Preferred dialect; defaults to `ui.selector_dialect`
        """
        if dialect is None:
            from .config_loader import get_ui_settings
            dialect = get_ui_settings().selector_dialect

        self.locator_set = locator_set
        self.common = common
        self.dialect = dialect
        self.page: Optional[Page] = None

        self._selectors: Dict[str, Selector] = {}
        self._locators: Dict[str, Locator] = {}

        self._validate()
        self.bind(page)

    # =========================================================================
    # Binding
    # =========================================================================

    def bind(self, page: Page) -> None:
        """
        Bind the registry (and the injected common registry) to a page.

        Rebinding to a different page rebuilds every static entry.
        """
        if self.common is not None:
            self.common.bind(page)

        if page is self.page and self._locators:
            return

        self.page = page
        self._initialize()

    def _initialize(self) -> None:
        selectors: Dict[str, Selector] = {}
        locators: Dict[str, Locator] = {}
        for key, definition in self.locator_set.static.items():
            kind, text = self._select_dialect(key, definition)
            selector = Selector(kind, text)
            selectors[key] = selector
            locators[key] = self.page.locator(selector.query)

        self._selectors = selectors
        self._locators = locators
        logger.debug(
            f"Locator registry '{self.locator_set.name}' bound: "
            f"{len(selectors)} static keys ({self.dialect.name.lower()})"
        )

    def _validate(self) -> None:
        static = self.locator_set.static
        dynamic = self.locator_set.dynamic

        overlap = set(static) & set(dynamic)
        if overlap:
            raise LocatorResolutionError(
                f"Keys declared both static and dynamic in "
                f"'{self.locator_set.name}': {sorted(overlap)}"
            )

        if self.common is not None:
            shadowed = [key for key in self.locator_set.keys() if key in self.common]
            if shadowed:
                raise LocatorResolutionError(
                    f"Keys of '{self.locator_set.name}' shadow the common set "
                    f"'{self.common.locator_set.name}': {sorted(shadowed)}"
                )

        for key, definition in {**static, **dynamic}.items():
            self._select_dialect(key, definition)

    def _select_dialect(
        self,
        key: str,
        definition: LocatorDefinition,
    ) -> Tuple[SelectorKind, str]:
        """Pick the selector text for the active dialect."""
        declared: Dict[SelectorKind, str] = {}
        for dialect_name, text in definition.items():
            try:
                declared[SelectorKind.parse(dialect_name)] = text
            except ValueError as e:
                raise LocatorResolutionError(
                    f"Locator '{self.locator_set.name}.{key}': {e}"
                ) from e

        if self.dialect in declared:
            return self.dialect, declared[self.dialect]
        if len(declared) == 1:
            kind, text = next(iter(declared.items()))
            logger.debug(
                f"Locator '{self.locator_set.name}.{key}' has no "
                f"{self.dialect.name.lower()} variant, using {kind.name.lower()}"
            )
            return kind, text

        raise LocatorResolutionError(
            f"Locator '{self.locator_set.name}.{key}' declares no selector"
        )

    # =========================================================================
    # Resolution
    # =========================================================================

    def __contains__(self, key: str) -> bool:
        return (
            key in self.locator_set.static
            or key in self.locator_set.dynamic
            or (self.common is not None and key in self.common)
        )

    def keys(self) -> List[str]:
        """All keys resolvable through this registry (common set included)."""
        keys = self.locator_set.keys()
        if self.common is not None:
            keys.extend(self.common.keys())
        return keys

    def resolve(self, key: str, param: Optional[str] = None) -> Selector:
        """
        Resolve a locator key to its selector expression.

        Args:
            key: Locator key
            param: Run-time value for dynamic keys

        Returns:
            Selector for the active dialect

        Raises:
            LocatorResolutionError: Unknown key, or parameter misuse
        """
        if key in self._selectors:
            if param is not None:
                raise LocatorResolutionError(
                    f"Locator '{self.locator_set.name}.{key}' is static "
                    f"and takes no parameter (got {param!r})"
                )
            return self._selectors[key]

        if key in self.locator_set.dynamic:
            if param is None:
                raise LocatorResolutionError(
                    f"Locator '{self.locator_set.name}.{key}' is dynamic "
                    f"and requires a parameter"
                )
            kind, template = self._select_dialect(key, self.locator_set.dynamic[key])
            return render_template(kind, template, param)

        if self.common is not None and key in self.common:
            return self.common.resolve(key, param)

        raise LocatorResolutionError(
            f"Unknown locator key '{key}' in registry '{self.locator_set.name}'"
        )

    def locator(
        self,
        key: str,
        param: Optional[str] = None,
        match: Optional[MatchPolicy] = None,
    ) -> Locator:
        """
        Build the Playwright locator for a key.

        Args:
            key: Locator key
            param: Run-time value for dynamic keys
            match: FIRST or ALL; defaults to ALL for static keys and
                FIRST for dynamic keys

        Returns:
            Playwright Locator
        """
        selector = self.resolve(key, param)

        if key in self._locators:
            locator = self._locators[key]
        elif key in self.locator_set.dynamic:
            locator = self.page.locator(selector.query)
        else:
            return self.common.locator(key, param, match)

        if match is None:
            match = MatchPolicy.FIRST if param is not None else MatchPolicy.ALL
        return locator.first if match is MatchPolicy.FIRST else locator

    def describe(self, key: str, param: Optional[str] = None) -> str:
        """Human-readable description used in logs and wait errors."""
        label = key if param is None else f"{key}[{param}]"
        return f"{self.locator_set.name}.{label} ({self.resolve(key, param).query})"


__all__ = [
    "LocatorDefinition",
    "LocatorRegistry",
    "LocatorSet",
    "MatchPolicy",
]
