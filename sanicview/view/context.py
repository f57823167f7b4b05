"""
Template Context
Render-time state handed to helpers, and the proxy templates call helpers through
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, TYPE_CHECKING

from sanicview.exceptions import TemplateNotFoundError
from sanicview.logging import getLogger

if TYPE_CHECKING:
    from sanicview.view.engine import TemplateRenderer
    from sanicview.view.helpers.invoker import HelperInvoker

logger = getLogger(__name__)


@dataclass
class TemplateContext:
    """Template currently being rendered"""
    path: Path
    variables: Dict[str, Any]
    renderer: 'TemplateRenderer'
    invoker: Optional['HelperInvoker'] = None
    depth: int = 0

    def include(self, name: str, extra: Optional[Dict[str, Any]] = None) -> str:
        """
        Render another template with this template's variables

        Returns an empty string when the template does not resolve.
        """
        try:
            path = self.renderer.resolver.resolve(name.lower())
        except TemplateNotFoundError:
            logger.debug("Skipping include of missing template '%s'", name)
            return ''

        variables = dict(self.variables)
        variables.update(extra or {})
        return self.renderer.render(path, variables, self.invoker, depth=self.depth + 1)


class HelperProxy:
    """
    Attribute access to helpers from templates

    Example:
        {{ helpers.url('/users', {'page': 2}) }}
    """

    def __init__(self, context: TemplateContext):
        self._context = context

    def __getattr__(self, name: str):
        # Keep protocol lookups such as __html__ away from the registry
        if name.startswith('__'):
            raise AttributeError(name)

        def call(*args):
            if self._context.invoker is None:
                return ''
            return self._context.invoker.invoke(self._context, name, args)

        return call
