"""
URL Helper
Builds links from a path and optional query parameters
"""
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from sanicview.view.helpers.base import Helper


def url(path: str, parameters: Optional[Dict[str, Any]] = None) -> str:
    """
    Generate URL for path

    Args:
        path: URL path
        parameters: Query parameters

    Returns:
        Generated URL, absolute when app.URL is configured

    Example:
        url('users', {'page': 2})  # '/users?page=2'
    """
    from sanicview.support import Config

    path = f"/{str(path or '').lstrip('/')}"
    if parameters:
        path = f"{path}?{urlencode(parameters)}"

    root = Config.get('app.URL')
    if root:
        return f"{str(root).rstrip('/')}{path}"
    return path


class UrlHelper(Helper):
    """{{ helpers.url('/users', {'page': 2}) }}"""

    NAME = 'url'

    def call(self, context, args: List[Any]) -> str:
        if not args:
            return url('')
        return url(args[0], args[1] if len(args) > 1 else None)
