"""
Using Helper
Conditional inclusion of partial templates
"""
from typing import Any, List

from markupsafe import Markup

from sanicview.view.helpers.base import Helper


class UsingHelper(Helper):
    """
    Render a partial when it exists, render nothing otherwise

    The partial sees the current template's variables, optionally extended:

        {{ helpers.using('partials/sidebar', {'active': 'home'}) }}
    """

    NAME = 'using'
    RAW_OUTPUT = True

    def call(self, context, args: List[Any]) -> Markup:
        if not args:
            return Markup('')
        extra = args[1] if len(args) > 1 else None
        return Markup(context.include(str(args[0]), extra))
