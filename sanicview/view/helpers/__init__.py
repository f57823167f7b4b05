"""
Template Helpers
"""
from typing import List

from sanicview.view.helpers.base import Helper, HelperResult, canonical_name
from sanicview.view.helpers.registry import HelperRegistry, HelperUnit
from sanicview.view.helpers.invoker import HelperInvoker
from sanicview.view.helpers.url_helper import UrlHelper, url
from sanicview.view.helpers.config_helper import ConfigHelper
from sanicview.view.helpers.using_helper import UsingHelper


def default_helpers() -> List[HelperUnit]:
    """Fresh instances of the helpers every composer starts with"""
    return [UrlHelper(), ConfigHelper(), UsingHelper()]


__all__ = [
    'Helper',
    'HelperResult',
    'canonical_name',
    'HelperRegistry',
    'HelperUnit',
    'HelperInvoker',
    'UrlHelper',
    'ConfigHelper',
    'UsingHelper',
    'url',
    'default_helpers',
]
