"""
Route ordering and lookup on top of FastAPI's router.

Endpoints are declared on ``APIRouter`` instances and included under a
prefix.  Starlette tries routes in order and serves the first whose path
and method both match, answering 405 when only the path matched and 404
when nothing did.  Registration order alone would let ``/greet/{name}``
shadow a later ``/greet/everyone``, so once every router is included
:func:`prioritise_literal_routes` reorders the application's routes: the
route with the most literal segments comes first and equally specific
routes keep their registration order.

:func:`match_route` performs the same lookup for a single method and
path without dispatching.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from starlette.routing import BaseRoute, Match, Router


@dataclass(frozen=True)
class RouteMatch:
    """A matched route together with the parameters captured from the path."""

    route: BaseRoute
    path_params: Dict[str, Any]


def literal_segment_count(route: BaseRoute) -> int:
    path = getattr(route, "path", "")
    return sum(1 for segment in path.split("/") if segment and "{" not in segment)


def prioritise_literal_routes(router: Router) -> None:
    """Sort ``router.routes`` in place, most literal segments first."""
    # list.sort is stable, also with reverse=True
    router.routes.sort(key=literal_segment_count, reverse=True)


def match_route(routes: Iterable[BaseRoute], method: str, path: str) -> Optional[RouteMatch]:
    """Return the first route serving ``method`` on ``path``, or ``None``."""
    scope = {"type": "http", "method": method.upper(), "path": path, "root_path": ""}
    for route in routes:
        match, child_scope = route.matches(scope)
        if match is Match.FULL:
            return RouteMatch(route=route, path_params=child_scope.get("path_params", {}))
    return None
