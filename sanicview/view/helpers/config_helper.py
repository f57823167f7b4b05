"""
Config Helper
Exposes configuration values to templates
"""
from typing import Any, List

from sanicview.support import Config
from sanicview.view.helpers.base import Helper


class ConfigHelper(Helper):
    """{{ helpers.config('app.APP_NAME', 'Framework') }}"""

    NAME = 'config'

    def call(self, context, args: List[Any]) -> Any:
        if not args:
            return ''
        default = args[1] if len(args) > 1 else ''
        return Config.get(args[0], default)
