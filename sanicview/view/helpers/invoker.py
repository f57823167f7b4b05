"""
Helper Invoker
Call protocol between templates and registered helpers
"""
from typing import Any, List, Sequence, TYPE_CHECKING, Union

from sanicview.logging import getLogger
from sanicview.view.helpers.base import Helper, HelperResult
from sanicview.view.helpers.registry import HelperRegistry

if TYPE_CHECKING:
    from sanicview.view.context import TemplateContext

logger = getLogger(__name__)


class HelperInvoker:
    """Looks up helpers by name and tags their results for the renderer"""

    def __init__(self, registry: HelperRegistry):
        self.registry = registry

    def invoke(
        self,
        context: 'TemplateContext',
        name: str,
        args: Sequence[Any] = ()
    ) -> Union[HelperResult, str]:
        """
        Call a helper and return its output

        Structured helpers receive (context, args) and keep their own raw or
        escaped preference. Plain callables receive the arguments spread out
        and their output is always escaped.

        NOTE: an unregistered name returns an empty string instead of raising,
        so templates can probe optional helpers. A misspelled helper name
        therefore renders as nothing; check the debug log when output is
        unexpectedly empty.
        """
        helper = self.registry.get(name)
        if helper is None:
            logger.debug("Template helper '%s' is not registered", name)
            return ''

        args: List[Any] = list(args)
        if isinstance(helper, Helper):
            result = helper.call(context, args)
            if helper.raw_output:
                return HelperResult.raw(result)
            return HelperResult.escaped(result)

        return HelperResult.escaped(helper(*args))
