"""
View routing with authentication gates.

    router = ViewRouter(session, login_path="/", home_path="/dashboard")

    @router.route("/", redirect_if_authenticated=True)
    def login_view(session): ...

    @router.route("/students", requires_auth=True)
    async def students_view(session): ...

    result = await router.render("/students")

Gated routes wait for the session's initial check before deciding, so a
protected view is never rendered (or refused) on stale state.
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from school_client.session import AuthSession

View = Callable[[AuthSession], Any]


@dataclass(frozen=True)
class Rendered:
    path: str
    content: Any


@dataclass(frozen=True)
class Redirect:
    to: str


@dataclass(frozen=True)
class Route:
    path: str
    view: View
    requires_auth: bool = False
    redirect_if_authenticated: bool = False


class ViewRouter:
    def __init__(
        self,
        session: AuthSession,
        *,
        login_path: str = "/",
        home_path: str = "/dashboard",
    ):
        self.session = session
        self.login_path = login_path
        self.home_path = home_path
        self._routes: dict[str, Route] = {}

    def route(
        self,
        path: str,
        *,
        requires_auth: bool = False,
        redirect_if_authenticated: bool = False,
    ) -> Callable[[View], View]:
        """Register a view for ``path``."""

        def decorator(view: View) -> View:
            if path in self._routes:
                raise ValueError(f"Route already registered: {path}")
            self._routes[path] = Route(path, view, requires_auth, redirect_if_authenticated)
            return view

        return decorator

    @property
    def paths(self) -> list[str]:
        return list(self._routes)

    async def render(self, path: str) -> Rendered | Redirect:
        """
        Resolve ``path`` to a rendered view or a redirect.

        Unknown paths redirect to the login view.
        """
        route = self._routes.get(path)
        if route is None:
            return Redirect(self.login_path)

        if route.requires_auth or route.redirect_if_authenticated:
            await self.session.wait_until_ready()
            authenticated = self.session.is_authenticated()

            if route.requires_auth and not authenticated:
                return Redirect(self.login_path)
            if route.redirect_if_authenticated and authenticated:
                return Redirect(self.home_path)

        content = route.view(self.session)
        if inspect.isawaitable(content):
            content = await content
        return Rendered(path, content)
