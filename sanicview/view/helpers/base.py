"""
Template Helper Base
Structured helper contract and the result carrier handed to the renderer
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, TYPE_CHECKING

from markupsafe import escape

if TYPE_CHECKING:
    from sanicview.view.context import TemplateContext

_NAMESPACE_SEPARATORS = re.compile(r'[\\.]')
_FUNCTION_SUFFIX = 'function'


def canonical_name(name: str) -> str:
    """
    Canonical registry key for a declared helper name

    Lower-cases the name, strips a trailing 'function' and keeps the segment
    after the last namespace separator ('\\' or '.').

    Example:
        canonical_name('Namespace\\\\FooFunction')  # 'foo'
        canonical_name('app.helpers.Url')         # 'url'
    """
    name = name.lower()
    if name.endswith(_FUNCTION_SUFFIX):
        name = name[:-len(_FUNCTION_SUFFIX)]
    return _NAMESPACE_SEPARATORS.split(name)[-1]


class Helper(ABC):
    """
    Base class for structured template helpers

    Subclasses declare the name they register under and whether their output
    is trusted markup.

    Example:
        class UpperFunction(Helper):
            NAME = 'app.helpers.UpperFunction'   # registers as 'upper'

            def call(self, context, args):
                return str(args[0]).upper()
    """

    NAME: Optional[str] = None
    RAW_OUTPUT: bool = False

    @property
    def raw_output(self) -> bool:
        """True when the result is inserted into markup without escaping"""
        return self.RAW_OUTPUT

    @abstractmethod
    def call(self, context: 'TemplateContext', args: List[Any]) -> Any:
        """
        Run the helper for one template call site

        Args:
            context: Template being rendered
            args: Positional arguments from the call site
        """


@dataclass(frozen=True)
class HelperResult:
    """
    Value returned by a helper call, tagged with its escaping requirement

    The renderer consumes it through __html__ at the insertion point.
    """
    value: Any
    requires_escaping: bool = True

    @classmethod
    def escaped(cls, value: Any) -> 'HelperResult':
        return cls(value, requires_escaping=True)

    @classmethod
    def raw(cls, value: Any) -> 'HelperResult':
        return cls(value, requires_escaping=False)

    def __html__(self) -> str:
        if self.requires_escaping:
            return str(escape(self._text()))
        return self._text()

    def __str__(self) -> str:
        return self._text()

    def __bool__(self) -> bool:
        # {% if helpers.config('feature.ON') %} tests the helper's value
        return bool(self.value)

    def _text(self) -> str:
        return '' if self.value is None else str(self.value)
