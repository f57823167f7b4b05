"""
Template Path Resolver
Maps template names to readable files under the template directory
"""
import os
from pathlib import Path
from typing import Optional, Union

from sanicview.exceptions import TemplateNotFoundError


class TemplatePathResolver:
    """
    Usage:
        resolver = TemplatePathResolver('views')
        resolver.resolve('users/show')  # views/users/show.html
    """

    def __init__(self, template_dir: Union[str, Path], extension: Optional[str] = None):
        from sanicview.defaults import DEFAULT_TEMPLATE_EXTENSION
        self.template_dir = Path(template_dir).resolve()
        self.extension = DEFAULT_TEMPLATE_EXTENSION if extension is None else extension

    @classmethod
    def from_config(cls) -> 'TemplatePathResolver':
        """Build a resolver from template.TEMPLATE_DIR and template.TEMPLATE_EXTENSION"""
        from sanicview.defaults import DEFAULT_TEMPLATE_DIR, DEFAULT_TEMPLATE_EXTENSION
        from sanicview.support import Config

        return cls(
            Config.get('template.TEMPLATE_DIR', DEFAULT_TEMPLATE_DIR),
            Config.get('template.TEMPLATE_EXTENSION', DEFAULT_TEMPLATE_EXTENSION),
        )

    def to_path(self, name: str) -> Path:
        """Path a template name maps to, without checking it exists"""
        return (self.template_dir / f"{name.strip('/')}{self.extension}").resolve()

    def resolve(self, name: str) -> Path:
        """
        Resolve a template name to a readable file

        Raises:
            TemplateNotFoundError: If the file is missing, unreadable or
                outside the template directory
        """
        path = self.to_path(name)

        if not path.is_relative_to(self.template_dir):
            raise TemplateNotFoundError(name)

        if not path.is_file() or not os.access(path, os.R_OK):
            raise TemplateNotFoundError(name)

        return path

    def exists(self, name: str) -> bool:
        try:
            self.resolve(name)
        except TemplateNotFoundError:
            return False
        return True

    def template_name(self, path: Union[str, Path]) -> str:
        """Loader-relative name of a resolved path"""
        return Path(path).resolve().relative_to(self.template_dir).as_posix()
