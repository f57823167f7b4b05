"""
View Package
Template resolution, rendering and helpers
"""
from sanicview.view.resolver import TemplatePathResolver
from sanicview.view.context import TemplateContext, HelperProxy
from sanicview.view.engine import TemplateRenderer

__all__ = [
    'TemplatePathResolver',
    'TemplateContext',
    'HelperProxy',
    'TemplateRenderer',
]
