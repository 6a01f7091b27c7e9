"""
Static route tables.

A ``RouteEntry`` maps an HTTP method and path to a handler name on a
controller, wrapped by an ordered middleware chain. ``register_routes``
applies a table to a Flask ``Blueprint`` (or anything exposing
``add_url_rule``) and returns it.
"""
from dataclasses import dataclass
from typing import Callable, Tuple


@dataclass(frozen=True)
class RouteEntry:
    method: str
    path: str
    handler: str
    middleware: Tuple[Callable, ...] = ()

    def build_view(self, controller):
        """Wrap the controller's handler so the first middleware runs first."""
        view = getattr(controller, self.handler)
        for middleware in reversed(self.middleware):
            view = middleware(view)
        return view


def register_routes(router, entries, controller):
    for entry in entries:
        router.add_url_rule(
            entry.path,
            entry.handler,
            entry.build_view(controller),
            methods=[entry.method]
        )
    return router
