"""
Helper Registry
Named template helpers, keyed by canonical name
"""
from typing import Any, Callable, Dict, List, Optional, Union

from sanicview.exceptions import InvalidHelperError
from sanicview.logging import getLogger
from sanicview.view.helpers.base import Helper, canonical_name

logger = getLogger(__name__)

HelperUnit = Union[Helper, Callable[..., Any]]


class HelperRegistry:
    """
    Registry of helpers available to templates

    Example:
        registry = HelperRegistry()
        registry.register(UrlHelper())                 # registered as 'url'
        registry.register('Upper', lambda s: s.upper())  # registered as 'upper'
    """

    def __init__(self, helpers: Optional[List[HelperUnit]] = None):
        self._helpers: Dict[str, HelperUnit] = {}
        for helper in helpers or []:
            self.register(helper)

    def register(self, name: Union[str, Helper], func: Optional[HelperUnit] = None) -> str:
        """
        Register a helper and return the name it was stored under

        A Helper instance given as first argument is named from its declared
        NAME. Otherwise `name` is an explicit name and `func` must be a Helper
        or a callable. A later registration under the same name replaces the
        earlier one.

        Raises:
            InvalidHelperError: If the unit is neither a Helper nor callable
        """
        if isinstance(name, Helper):
            func = name
            if not func.NAME:
                raise InvalidHelperError(
                    f"Helper {type(func).__name__} does not declare a NAME"
                )
            name = canonical_name(func.NAME)
        elif isinstance(name, str):
            name = name.lower()
        else:
            raise InvalidHelperError('No callable or Helper given')

        if not (isinstance(func, Helper) or callable(func)):
            raise InvalidHelperError('No callable or Helper given')

        if name in self._helpers:
            logger.debug("Replacing helper '%s'", name)
        self._helpers[name] = func
        return name

    def get(self, name: str) -> Optional[HelperUnit]:
        return self._helpers.get(name.lower())

    def has(self, name: str) -> bool:
        return name.lower() in self._helpers

    def get_registered(self) -> List[str]:
        return list(self._helpers.keys())

    def __len__(self) -> int:
        return len(self._helpers)

    def __contains__(self, name: str) -> bool:
        return self.has(name)
