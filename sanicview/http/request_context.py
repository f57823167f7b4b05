"""
Request Context
Controller and action identifiers used to pick a default template
"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RequestContext:
    controller: str
    action: str

    @classmethod
    def from_route_name(cls, route_name: str) -> 'RequestContext':
        """
        Build from a Sanic route name

        Sanic prefixes route names with the application name, which is
        dropped. The last segment is the action, the rest the controller
        (nested blueprint segments become nested template directories).

        Example:
            RequestContext.from_route_name('MyApp.users.show')  # users / show
            RequestContext.from_route_name('MyApp.home')        # index / home
        """
        from sanicview.defaults import DEFAULT_CONTROLLER

        parts = [part for part in route_name.split('.') if part]
        if len(parts) > 1:
            parts = parts[1:]
        if not parts:
            raise ValueError(f"Route name '{route_name}' has no action segment")

        action = parts[-1]
        controller = '/'.join(parts[:-1]) or DEFAULT_CONTROLLER
        return cls(controller=controller, action=action)

    @classmethod
    def from_request(cls, request: Any) -> 'RequestContext':
        """Build from the matched route of a Sanic request"""
        route = getattr(request, 'route', None)
        if route is None or not route.name:
            raise ValueError(f"Request to '{request.path}' has no named route")
        return cls.from_route_name(route.name)
