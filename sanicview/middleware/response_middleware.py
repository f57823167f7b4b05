"""
Response Composer Middleware
Gives every request its own ResponseComposer on request.ctx.response
"""
from typing import Optional

from sanic import Request, Sanic

from sanicview.http import BufferedTransport, RequestContext, ResponseComposer
from sanicview.logging import getLogger
from sanicview.view import TemplateRenderer

logger = getLogger(__name__)

LOGGER_NAME = 'sanicview'


class ResponseComposerMiddleware:
    """
    Attaches a fresh composer to each request

    Handlers fill it and hand it to sanicview.http.respond():

        return await respond(request.ctx.response)

    Configuration:
    - response.MIDDLEWARE_ENABLED: install() skips the middleware when False
    - response.CONTEXT_ATTRIBUTE: request.ctx attribute holding the composer
    """

    ENABLED_CONFIG_KEY = 'response.MIDDLEWARE_ENABLED'
    CONFIG_MAPPING = {
        'context_attribute': ('response.CONTEXT_ATTRIBUTE', 'response'),
    }
    DEFAULT_ENABLED = True

    def __init__(
        self,
        context_attribute: str = 'response',
        renderer: Optional[TemplateRenderer] = None
    ):
        self.context_attribute = context_attribute
        # Shared by all requests; holds no per-request state
        self.renderer = renderer

    @classmethod
    def is_enabled(cls) -> bool:
        from sanicview.support import Config

        return bool(Config.get(cls.ENABLED_CONFIG_KEY, cls.DEFAULT_ENABLED))

    @classmethod
    def from_config(cls) -> Optional['ResponseComposerMiddleware']:
        """
        Build the middleware from the response.* config

        Returns:
            Middleware instance if enabled, None otherwise
        """
        from sanicview.support import Config

        if not cls.is_enabled():
            return None

        params = {
            param_name: Config.get(config_key, default_value)
            for param_name, (config_key, default_value) in cls.CONFIG_MAPPING.items()
        }
        return cls(**params)

    def make_composer(self, request: Request) -> ResponseComposer:
        route = getattr(request, 'route', None)
        context = RequestContext.from_request(request) if route is not None and route.name else None

        return ResponseComposer(
            transport=BufferedTransport(),
            renderer=self.renderer,
            request=context,
        )

    async def before_request(self, request: Request):
        setattr(request.ctx, self.context_attribute, self.make_composer(request))
        return None


def setup_logging():
    """
    Configure the package logger from the logging.* config

    Does nothing unless logging.ENABLED is set, so applications that
    configure logging themselves keep their handlers.
    """
    from sanicview.logging import LoggerConfig
    from sanicview.support import Config

    if not Config.get('logging.ENABLED', False):
        return None

    return LoggerConfig.setup_logger(
        LOGGER_NAME,
        format_type=Config.get('logging.FORMAT', 'json'),
        log_file=Config.get('logging.LOG_FILE'),
        filter_sensitive=Config.get('logging.FILTER_SENSITIVE', True),
    )


def install(app: Sanic, middleware: Optional[ResponseComposerMiddleware] = None) -> Optional[ResponseComposerMiddleware]:
    """
    Register the composer middleware on a Sanic app when enabled in config

    Also sets up the package logger when logging.ENABLED is set.

    Returns:
        The installed middleware, or None when disabled
    """
    setup_logging()

    middleware = middleware or ResponseComposerMiddleware.from_config()
    if middleware is None:
        logger.debug("Response composer middleware disabled")
        return None

    if middleware.renderer is None:
        middleware.renderer = TemplateRenderer.from_config()

    app.register_middleware(middleware.before_request, attach_to='request')
    return middleware
