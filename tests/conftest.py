"""Shared fixtures for sanicview tests."""
import textwrap
from pathlib import Path
from typing import List, Tuple

import pytest

from sanicview.exceptions import AlreadyEmittedError
from sanicview.http import ResponseComposer, Transport
from sanicview.support import Config, EventDispatcher
from sanicview.view import TemplatePathResolver, TemplateRenderer


class RecordingTransport(Transport):
    """Transport that records every call in order."""

    def __init__(self):
        self.events: List[Tuple[str, str]] = []
        self._sent = False

    def send_header(self, line: str):
        if self._sent:
            raise AlreadyEmittedError(f"Cannot send header '{line}', headers already sent")
        self.events.append(('header', line))

    def write(self, data: str):
        self._sent = True
        self.events.append(('body', data))

    def headers_sent(self) -> bool:
        return self._sent

    @property
    def header_lines(self) -> List[str]:
        return [value for kind, value in self.events if kind == 'header']

    @property
    def body(self) -> str:
        return ''.join(value for kind, value in self.events if kind == 'body')


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Each test starts without runtime overrides or loaded config files."""
    monkeypatch.setattr(Config, '_loaded', {})
    monkeypatch.setattr(Config, '_runtime_overrides', {})
    yield


@pytest.fixture
def template_dir(tmp_path) -> Path:
    views = tmp_path / 'views'
    views.mkdir()
    return views


def write_template(root: Path, name: str, content: str) -> Path:
    """Write a template file with dedented content and no trailing newline."""
    path = root / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).strip('\n'), encoding='utf-8')
    return path


@pytest.fixture
def renderer(template_dir) -> TemplateRenderer:
    return TemplateRenderer(TemplatePathResolver(template_dir))


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def events() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def make_composer(transport, renderer, events):
    """Factory for composers wired to the test transport and renderer."""
    def factory(**kwargs) -> ResponseComposer:
        kwargs.setdefault('transport', transport)
        kwargs.setdefault('renderer', renderer)
        kwargs.setdefault('events', events)
        return ResponseComposer(**kwargs)
    return factory
