"""The storefront's route table.

``ROUTES`` is built once at import time and never mutated. ``register_routes``
binds it, in order, onto a blueprint; the not-found page is deliberately kept
out of the table and is only reached through ``render_fallback``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, Iterable, Union

from flask import Blueprint, Response, make_response, redirect

from shopfront.app.rendering import get_renderer

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


@dataclass(frozen=True)
class ViewContext:
    """Display values for one render call."""

    page_title: str
    path: str


@dataclass(frozen=True)
class Render:
    template: str
    page_title: str
    path: str
    status: int = 200

    def context(self) -> ViewContext:
        return ViewContext(page_title=self.page_title, path=self.path)


@dataclass(frozen=True)
class Redirect:
    target: str
    status: int = 302


Action = Union[Render, Redirect]


@dataclass(frozen=True)
class Route:
    method: str
    rule: str
    endpoint: str
    action: Action


ROUTES: tuple[Route, ...] = (
    Route("GET", "/", "index", Render("pages/index.html", "Online Shop", "/")),
    Route("GET", "/cart", "cart", Render("pages/cart.html", "Cart", "cart")),
    Route("GET", "/products", "products", Render("pages/products.html", "Products", "products")),
    Route("GET", "/add-product", "add_product_form", Render("pages/add-product.html", "Add Product", "add-product")),
    # Form body is not read; there is nothing to store it in.
    Route("POST", "/add-product", "add_product_submit", Redirect("/products")),
    Route("GET", "/admin", "admin", Render("admin/admin.html", "Admin", "admin")),
)

NOT_FOUND = Render("pages/404.html", "Page not found", "", status=404)


def templates_for(routes: Iterable[Route]) -> list[str]:
    """Every template the app can render, fallback included."""
    names = [r.action.template for r in routes if isinstance(r.action, Render)]
    return names + [NOT_FOUND.template]


def render_page(action: Render) -> Response:
    body = get_renderer().render(action.template, asdict(action.context()))
    return make_response(body, action.status, {"Content-Type": HTML_CONTENT_TYPE})


def render_fallback() -> Response:
    return render_page(NOT_FOUND)


def _view_for(action: Action) -> Callable[[], Response]:
    if isinstance(action, Redirect):
        def view():
            return redirect(action.target, code=action.status)
    else:
        def view():
            return render_page(action)
    return view


def register_routes(bp: Blueprint, routes: Iterable[Route] = ROUTES) -> Blueprint:
    for route in routes:
        bp.add_url_rule(
            route.rule,
            endpoint=route.endpoint,
            view_func=_view_for(route.action),
            methods=[route.method],
            # Unregistered methods, OPTIONS included, go to the fallback
            provide_automatic_options=False,
        )
    return bp


pages_bp = register_routes(Blueprint("pages", __name__))
