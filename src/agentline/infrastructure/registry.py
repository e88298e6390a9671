"""
Name-to-class lookup for agent invokers.

``claude`` and ``mock`` ship with agentline. Other packages add invokers
through the ``agentline.invokers`` entry point group:

    [project.entry-points."agentline.invokers"]
    aider = "agentline_aider:AiderInvoker"

A plugin cannot shadow a built-in name; ``register()`` can, which is how
tests swap in their own invokers.
"""

import warnings
from importlib.metadata import entry_points
from typing import Any

from agentline.domain.interfaces import InvokerInterface
from agentline.infrastructure.invokers import ClaudeCliInvoker, MockInvoker

ENTRY_POINT_GROUP = "agentline.invokers"

_BUILTIN_INVOKERS: dict[str, type[InvokerInterface]] = {
    "claude": ClaudeCliInvoker,
    "mock": MockInvoker,
}


class InvokerRegistry:
    """
    Class-level table of invoker classes, keyed by the name used in
    ``config.json`` and ``--invoker``.

    Entry points are scanned once, the first time a name is looked up.
    """

    _invokers: dict[str, type[InvokerInterface]] = dict(_BUILTIN_INVOKERS)
    _loaded: bool = False

    @classmethod
    def _load_entry_points(cls) -> None:
        if cls._loaded:
            return

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            if ep.name in cls._invokers:
                continue
            try:
                cls._invokers[ep.name] = ep.load()
            except Exception as e:
                warnings.warn(
                    f"Skipping invoker plugin '{ep.name}' ({ep.value}): {e}",
                    stacklevel=2,
                )

        cls._loaded = True

    @classmethod
    def register(cls, name: str, invoker_class: type[InvokerInterface]) -> None:
        """Add or replace the invoker class bound to ``name``."""
        cls._invokers[name] = invoker_class

    @classmethod
    def get(cls, name: str) -> type[InvokerInterface]:
        """
        Raises:
            KeyError: Unknown name; the message lists the known ones
        """
        cls._load_entry_points()
        try:
            return cls._invokers[name]
        except KeyError:
            known = ", ".join(sorted(cls._invokers)) or "(none)"
            raise KeyError(
                f"Invoker '{name}' not found. Available invokers: {known}"
            ) from None

    @classmethod
    def create(cls, name: str, **config: Any) -> InvokerInterface:
        """
        Instantiate the invoker bound to ``name`` with ``config`` as keyword
        arguments. A mismatched ``config`` surfaces as the constructor's
        TypeError.
        """
        return cls.get(name)(**config)

    @classmethod
    def available(cls) -> list[str]:
        cls._load_entry_points()
        return sorted(cls._invokers)

    @classmethod
    def clear(cls) -> None:
        """Back to the built-ins only; plugins are rescanned on next lookup."""
        cls._invokers = dict(_BUILTIN_INVOKERS)
        cls._loaded = False
