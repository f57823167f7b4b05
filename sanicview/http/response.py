"""
Response Composer
Collects headers, printed output and template data during a request and
emits them in one deterministic sequence
"""
import gettext
import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from sanicview.exceptions import AlreadyEmittedError, TemplateNotFoundError
from sanicview.http.output_buffer import OutputBuffer
from sanicview.http.request_context import RequestContext
from sanicview.http.transport import BufferedTransport, Transport
from sanicview.logging import getLogger
from sanicview.support import Config, EventDispatcher, dispatcher
from sanicview.view.engine import TemplateRenderer
from sanicview.view.helpers import (
    Helper,
    HelperInvoker,
    HelperRegistry,
    HelperUnit,
    default_helpers,
)

logger = getLogger(__name__)


class ResponseComposer:
    """
    Per-request response composer

    With late output enabled (config 'response.OUTPUT_LATE', default True)
    headers and printed output are held until flush(); otherwise they go
    straight to the transport. flush() then renders the template chosen with
    set_template(), or the one derived from the request's controller and
    action, unless suppress_template() was called.

    Example:
        composer = ResponseComposer(request=RequestContext('users', 'show'))
        composer.header('X-Request-Id', request_id)
        composer.set('user', user)
        composer.flush()   # renders views/users/show.html
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        renderer: Optional[TemplateRenderer] = None,
        request: Optional[RequestContext] = None,
        events: Optional[EventDispatcher] = None,
        translator: Optional[Callable[[str], str]] = None,
        helpers: Optional[List[HelperUnit]] = None,
        deferred: Optional[bool] = None
    ):
        """
        Args:
            transport: Where output is emitted (in-memory buffer by default)
            renderer: Template renderer (built from template.* config by default)
            request: Controller/action used to derive the default template
            events: Dispatcher notified with 'output' before emission
            translator: Lookup used by write_translated (gettext by default)
            helpers: Helpers registered at construction (default_helpers() by default)
            deferred: Override of the response.OUTPUT_LATE config value
        """
        from sanicview.defaults import DEFAULT_OUTPUT_LATE

        if deferred is None:
            deferred = Config.get('response.OUTPUT_LATE', DEFAULT_OUTPUT_LATE)

        self.transport = transport if transport is not None else BufferedTransport()
        self.request = request
        self.events = events if events is not None else dispatcher
        self.translator = translator or gettext.gettext

        self._renderer = renderer
        self._buffer = OutputBuffer(self.transport, deferred)
        self._show_template = True
        self._template_path: Optional[Path] = None
        self._variables: Dict[str, Any] = {}
        self._emitted = False

        self.helpers = HelperRegistry()
        self._invoker = HelperInvoker(self.helpers)
        for helper in default_helpers() if helpers is None else helpers:
            self.register(helper)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def deferred(self) -> bool:
        return self._buffer.deferred

    @property
    def renderer(self) -> TemplateRenderer:
        if self._renderer is None:
            self._renderer = TemplateRenderer.from_config()
        return self._renderer

    @property
    def pending_headers(self) -> List[str]:
        """Queued header lines; 'output' listeners may edit this list"""
        return self._buffer.headers

    @property
    def pending_body(self) -> str:
        return self._buffer.body

    @pending_body.setter
    def pending_body(self, value: str):
        self._buffer.body = value

    @property
    def template_path(self) -> Optional[Path]:
        return self._template_path

    @property
    def template_suppressed(self) -> bool:
        return not self._show_template

    @property
    def emitted(self) -> bool:
        return self._emitted

    @property
    def variables(self) -> Dict[str, Any]:
        return dict(self._variables)

    # ------------------------------------------------------------------
    # Headers and output
    # ------------------------------------------------------------------

    def header(self, name: str, value: Optional[str] = None):
        """
        Set a header now, or at flush() when late output is enabled

        Args:
            name: Header name, or a complete header line when value is None
            value: Header value

        Raises:
            AlreadyEmittedError: If the transport already sent its headers
        """
        line = name if value is None else f"{name}: {value}"
        if self.transport.headers_sent():
            raise AlreadyEmittedError(f"Cannot set header '{line}', headers already sent")
        self._buffer.header(line)

    def write(self, value: Any, *args):
        """
        Print a value, printf-style formatted when extra arguments are given

        Example:
            composer.write('Hello %s, you have %d messages', name, count)
        """
        if args:
            self.write_formatted(value, *args)
        else:
            self._buffer.write(str(value))

    def write_formatted(self, fmt: str, *args):
        self._buffer.write(fmt % args)

    def write_translated(self, key: str, *args):
        """Translate `key` and print it with the remaining arguments"""
        self.write(self.translator(key), *args)

    def write_json(self, data: Any):
        """
        Print data as JSON with a JSON Content-Type; no template follows
        """
        from sanicview.defaults import DEFAULT_JSON_CONTENT_TYPE

        # Serialize first so unserializable data leaves the composer untouched
        body = json.dumps(data)
        self.suppress_template()
        self.header('Content-Type', DEFAULT_JSON_CONTENT_TYPE)
        self._buffer.write(body)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def set_template(self, name: str):
        """
        Select the template rendered by flush()

        The name is given without extension or template directory, e.g.
        'users/show'. An explicit template always wins over the derived one.

        Raises:
            TemplateNotFoundError: If the template does not exist or cannot be read
        """
        self._template_path = self._resolve(name)

    def suppress_template(self):
        """Render no template on flush()"""
        self._show_template = False

    def _resolve(self, name: str) -> Path:
        name = name.lower()
        path = self.renderer.resolver.resolve(name)
        logger.debug("Template '%s' resolved to %s", name, path)
        return path

    def _default_template_name(self) -> str:
        from sanicview.defaults import DEFAULT_TEMPLATE_SEPARATOR

        if self.request is None:
            raise TemplateNotFoundError(
                '', "No template selected and no request context to derive one from"
            )
        return (
            f"{self.request.controller.lower()}"
            f"{DEFAULT_TEMPLATE_SEPARATOR}"
            f"{self.request.action.lower()}"
        )

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def flush(self):
        """
        Emit everything: 'output' event, queued headers, queued body, then
        the template unless suppressed. Later calls do nothing.

        Raises:
            TemplateNotFoundError: If the selected or derived template is missing
        """
        from sanicview.defaults import DEFAULT_OUTPUT_EVENT

        if self._emitted:
            logger.debug("Response already emitted, ignoring flush()")
            return
        self._emitted = True

        self.events.trigger(DEFAULT_OUTPUT_EVENT, self)
        self._buffer.flush()

        if not self._show_template:
            return

        path = self._template_path or self._resolve(self._default_template_name())
        for chunk in self.renderer.stream(path, self._variables, self._invoker):
            self.transport.write(chunk)

    output = flush

    # ------------------------------------------------------------------
    # Template variables
    # ------------------------------------------------------------------

    def set(self, name: str, value: Any):
        self._variables[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self._variables.get(name, default)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def register(self, name: Union[str, Helper], func: Optional[HelperUnit] = None) -> str:
        """
        Register a template helper

        Example:
            composer.register(UrlHelper())                       # as 'url'
            composer.register('Shout', lambda s: s.upper() + '!')  # as 'shout'
        """
        registered = self.helpers.register(name, func)
        logger.debug("Template helper '%s' registered", registered)
        return registered

    def call(self, context, name: str, args: List[Any]):
        """Invoke a helper for a template; unknown names return ''"""
        return self._invoker.invoke(context, name, args)
