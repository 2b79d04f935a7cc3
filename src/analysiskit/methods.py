"""Method registries shared by the algorithm families.

Each family (nonlinear, integration, differential, interpolation,
approximation) keeps a :class:`MethodRegistry` that maps user-provided
method names and aliases onto the function implementing the strategy.
Lookups are case, spacing and punctuation insensitive, so ``"False-Position"``,
``"false_position"`` and ``"FALSE POSITION"`` all resolve to the same entry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

__all__ = [
    "MethodSpec",
    "MethodRegistry",
]


@dataclass(frozen=True)
class MethodSpec:
    """A registered strategy.

    Attributes:
        name: Canonical public name of the method (e.g. ``"secant"``).
        function: Callable implementing the strategy.
        aliases: Additional accepted spellings.
        supports_complex: Whether the strategy accepts complex scalars.
    """

    name: str
    function: Callable
    aliases: tuple[str, ...] = ()
    supports_complex: bool = True


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


class MethodRegistry:
    """Lookup table from method names and aliases to :class:`MethodSpec` entries.

    Args:
        family: Human-readable family name used in error messages
            (e.g. ``"integration"``).
        specs: The built-in methods of the family.
    """

    def __init__(self, family: str, specs: Iterable[MethodSpec]):
        self.family = family
        self._specs: list[MethodSpec] = list(specs)
        self._maps: tuple[Mapping[str, MethodSpec], tuple[str, ...]] | None = None

    def _method_maps(self) -> tuple[Mapping[str, MethodSpec], tuple[str, ...]]:
        """Construct and cache the lookup tables.

        The tables are rebuilt lazily after :meth:`register` invalidates them.

        Returns:
            A pair ``(method_map, canonical_names)`` where ``method_map`` maps
            normalized names and aliases to specs and ``canonical_names``
            lists the canonical names in registration order.
        """
        if self._maps is None:
            method_map: dict[str, MethodSpec] = {}
            canonical: list[str] = []
            for spec in self._specs:
                method_map[_norm(spec.name)] = spec
                if spec.name not in canonical:
                    canonical.append(spec.name)
                for a in spec.aliases:
                    method_map[_norm(a)] = spec
            self._maps = (method_map, tuple(canonical))
        return self._maps

    def register(
        self,
        name: str,
        function: Callable,
        *,
        aliases: Iterable[str] = (),
        supports_complex: bool = True,
    ) -> MethodSpec:
        """Register a new method, or replace an existing one with the same name.

        Args:
            name: Canonical public name of the method.
            function: Callable with the same signature as the family's
                built-in strategies.
            aliases: Additional accepted spellings.
            supports_complex: Whether the method accepts complex scalars.

        Returns:
            The registered spec.
        """
        spec = MethodSpec(name, function, tuple(aliases), supports_complex)
        self._specs = [s for s in self._specs if _norm(s.name) != _norm(name)]
        self._specs.append(spec)
        self._maps = None
        return spec

    def resolve(self, method: str) -> MethodSpec:
        """Resolve a user-provided method name or alias to its spec.

        Args:
            method: User-provided method name or alias.

        Returns:
            Corresponding method spec.

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        method_map, canon = self._method_maps()
        if not isinstance(method, str):
            raise ValueError(f"{self.family} method must be a string; got {type(method).__name__}.")
        try:
            return method_map[_norm(method)]
        except KeyError:
            opts = ", ".join(canon)
            raise ValueError(
                f"Unknown {self.family} method '{method}'. Choose one of {{{opts}}}."
            ) from None

    def available(self) -> list[str]:
        """List canonical method names in registration order."""
        _, canon = self._method_maps()
        return list(canon)
