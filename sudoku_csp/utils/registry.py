# -*- coding: utf-8 -*-
"""A simple name -> class registry."""
from typing import Any, Callable, Dict, Optional

from sudoku_csp.utils.log import get_logger

logger = get_logger(__name__)


class Registry:
    """A registry to map strings to classes.

    Example:
        >>> RANDOM_PROVIDERS = Registry("random_providers")
        >>> @RANDOM_PROVIDERS.register_module("python")
        ... class PythonRandomProvider(RandomProvider):
        ...     pass
        >>> RANDOM_PROVIDERS.get("python")
    """

    def __init__(self, name: str):
        self._name = name
        self._default_mapping: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> Dict[str, Any]:
        return self._default_mapping

    def __contains__(self, module_key: str) -> bool:
        return module_key in self._default_mapping

    def __len__(self) -> int:
        return len(self._default_mapping)

    def get(self, module_key: str) -> Optional[Any]:
        """Get the registered module, or None if `module_key` is unknown."""
        return self._default_mapping.get(module_key, None)

    def _register_module(self, module_name: str, module_cls: Any, force: bool = False) -> None:
        if module_name in self._default_mapping and not force:
            raise KeyError(f"{module_name} is already registered in {self._name}")
        self._default_mapping[module_name] = module_cls
        logger.debug(f"Registered `{module_name}` in registry `{self._name}`")

    def register_module(
        self, module_name: str, module_cls: Optional[Any] = None, force: bool = False
    ) -> Callable:
        """Register a module, either directly or as a class decorator.

        Args:
            module_name (str): The name to register the module under.
            module_cls (Optional[Any]): The module to register. When omitted,
                a decorator is returned.
            force (bool): Overwrite an existing registration.
        """
        if not isinstance(module_name, str):
            raise TypeError(f"module_name must be a str, but got {type(module_name)}")

        if module_cls is not None:
            self._register_module(module_name, module_cls, force=force)
            return module_cls

        def _register(module_cls):
            self._register_module(module_name, module_cls, force=force)
            return module_cls

        return _register
