"""
Template Renderer
Jinja2 rendering of resolved template files with helper access
"""
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, TYPE_CHECKING, Union

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from sanicview.exceptions import FrameworkException
from sanicview.logging import getLogger
from sanicview.view.context import HelperProxy, TemplateContext
from sanicview.view.helpers.base import HelperResult
from sanicview.view.resolver import TemplatePathResolver

if TYPE_CHECKING:
    from sanicview.view.helpers.invoker import HelperInvoker

logger = getLogger(__name__)

HELPERS_VARIABLE = 'helpers'
MAX_INCLUDE_DEPTH = 16


def finalize_helper_result(value: Any) -> Any:
    """
    Apply a helper result's escaping requirement at the insertion point

    Runs for every {{ ... }} expression, so escaped helper output stays
    escaped even when the environment has autoescape turned off.
    """
    if isinstance(value, HelperResult):
        return Markup(value.__html__())
    return value


class TemplateRenderer:
    """
    Renders templates found by a TemplatePathResolver

    Templates see the variables passed in plus a `helpers` proxy:

        <a href="{{ helpers.url('/users') }}">{{ title }}</a>

    autoescape only affects plain template variables; helper results are
    always inserted according to their own escaping tag.
    """

    def __init__(self, resolver: TemplatePathResolver, autoescape: bool = True):
        self.resolver = resolver
        self.environment = Environment(
            loader=FileSystemLoader(str(resolver.template_dir)),
            autoescape=autoescape,
            finalize=finalize_helper_result,
        )

    @classmethod
    def from_config(cls) -> 'TemplateRenderer':
        return cls(TemplatePathResolver.from_config())

    def stream(
        self,
        path: Union[str, Path],
        variables: Optional[Dict[str, Any]] = None,
        invoker: Optional['HelperInvoker'] = None,
        depth: int = 0
    ) -> Iterator[str]:
        """
        Render a resolved template chunk by chunk

        Args:
            path: Path returned by the resolver
            variables: Data context of the template
            invoker: Helper invoker used for `helpers.<name>(...)` call sites
        """
        if depth > MAX_INCLUDE_DEPTH:
            raise FrameworkException(f"Template include depth exceeded while rendering '{path}'")

        variables = dict(variables or {})
        context = TemplateContext(
            path=Path(path),
            variables=variables,
            renderer=self,
            invoker=invoker,
            depth=depth,
        )

        template = self.environment.get_template(self.resolver.template_name(path))
        logger.debug("Rendering template '%s'", template.name)

        template_vars = dict(variables)
        template_vars[HELPERS_VARIABLE] = HelperProxy(context)
        return template.generate(**template_vars)

    def render(
        self,
        path: Union[str, Path],
        variables: Optional[Dict[str, Any]] = None,
        invoker: Optional['HelperInvoker'] = None,
        depth: int = 0
    ) -> str:
        """Render a resolved template to a string"""
        return ''.join(self.stream(path, variables, invoker, depth=depth))
