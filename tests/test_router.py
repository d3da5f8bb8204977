"""Tests for raptor.routing.router — per-resource routers and the builder."""

from typing import Any

import pytest

from raptor.errors import ConfigurationError, InvalidPathArgument, NoRouteMatches
from raptor.http.request import Request
from raptor.resources import Resource
from raptor.routing.route import Route
from raptor.routing.router import DEFAULT_HANDLERS, ROUTE_PATHS, Router, routes


class BlogPost:
    class Record:
        def __init__(self, params):
            self.params = params

        @classmethod
        def find_by_id(cls, id):
            return ("one", id)

        @classmethod
        def all(cls):
            return ["a", "b"]

        @classmethod
        def published(cls):
            return ["a"]

        @classmethod
        def drafts(cls, *args):
            return []

    class PresentsOne:
        def __init__(self, record):
            self.record = record

    class PresentsMany:
        def __init__(self, records):
            self.records = records


class _KindRenderer:
    def render(self, resource_name: str, kind: str, presenter: Any) -> str:
        return f"{resource_name}:{kind}"


class TestConventions:
    def test_route_paths(self) -> None:
        assert ROUTE_PATHS == {"show": "/%s/:id", "new": "/%s/new", "index": "/%s"}

    def test_default_handlers(self) -> None:
        assert set(DEFAULT_HANDLERS) == set(ROUTE_PATHS)


class TestRegistration:
    def test_wraps_resource(self) -> None:
        router = Router(BlogPost)
        assert isinstance(router.resource, Resource)
        assert router.resource.resource_name == "blog_post"

    def test_show(self) -> None:
        route = Router(BlogPost).show()
        assert str(route.path) == "/blog_post/:id"
        assert route.handler.name == "find_by_id"
        assert route.kind == "show"

    def test_new(self) -> None:
        route = Router(BlogPost).new()
        assert str(route.path) == "/blog_post/new"
        assert route.handler.func is BlogPost.Record
        assert route.kind == "new"

    def test_index(self) -> None:
        route = Router(BlogPost).index()
        assert str(route.path) == "/blog_post"
        assert route.handler.name == "all"
        assert route.plural is True

    def test_handler_override(self) -> None:
        route = Router(BlogPost).index("published")
        assert route.handler.name == "published"
        assert route.kind == "index"

    def test_custom_route(self) -> None:
        route = Router(BlogPost).route("/blog_post/drafts", "drafts", "drafts", plural=True)
        assert route.kind == "drafts"
        assert route.plural is True
        assert route.handler.variadic is True

    def test_custom_index_route_is_plural(self) -> None:
        route = Router(BlogPost).route("/blog_post/all", "all", "index")
        assert route.plural is True
        assert route.presenter_class is BlogPost.PresentsMany

    def test_custom_route_plural_override(self) -> None:
        route = Router(BlogPost).route("/blog_post/all", "all", "index", plural=False)
        assert route.presenter_class is BlogPost.PresentsOne

    def test_declaration_order_kept(self) -> None:
        router = Router(BlogPost)
        router.index()
        router.new()
        router.show()
        assert [r.kind for r in router] == ["index", "new", "show"]
        assert len(router) == 3
        assert [r.kind for r in router.routes] == ["index", "new", "show"]

    def test_declare_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown route kind 'destroy'"):
            Router(BlogPost).declare("destroy")

    def test_add_rejects_foreign_route(self) -> None:
        router = Router(BlogPost)
        other = Route.build("/blog_post", "all", "index", Resource(BlogPost))
        with pytest.raises(ConfigurationError):
            router.add(other)

    def test_repr(self) -> None:
        router = Router(BlogPost)
        router.index()
        assert repr(router) == "Router('blog_post', [/blog_post])"


class TestRoutesBuilder:
    def test_kind_names(self) -> None:
        router = routes(BlogPost, "show", "index")
        assert [r.kind for r in router] == ["show", "index"]

    def test_kind_handler_pairs(self) -> None:
        router = routes(BlogPost, ("index", "published"), "new")
        assert router.routes[0].handler.name == "published"
        assert router.routes[1].kind == "new"

    def test_unknown_kind_fails_at_startup(self) -> None:
        with pytest.raises(ConfigurationError):
            routes(BlogPost, "show", "edit")

    @pytest.mark.parametrize("declaration", [("index",), ("index", "all", "extra")])
    def test_malformed_declaration(self, declaration: tuple[str, ...]) -> None:
        with pytest.raises(ConfigurationError, match=r"\(kind, handler\) pair"):
            routes(BlogPost, declaration)  # type: ignore[arg-type]

    def test_unknown_handler_fails_at_startup(self) -> None:
        with pytest.raises(ConfigurationError):
            routes(BlogPost, ("show", "find_by_slug"))


class TestLookup:
    def test_matches(self) -> None:
        router = routes(BlogPost, "show", "index")
        assert router.matches("/blog_post/1")
        assert router.matches("/blog_post")
        assert not router.matches("/comment")

    def test_route_for_path(self) -> None:
        router = routes(BlogPost, "show", "index")
        assert router.route_for_path("/blog_post").kind == "index"

    def test_no_route_matches(self) -> None:
        router = routes(BlogPost, "show")
        with pytest.raises(NoRouteMatches, match="/blog_post/1/edit"):
            router.route_for_path("/blog_post/1/edit")

    def test_first_registered_match_wins(self) -> None:
        router = routes(BlogPost, "show", "new")
        assert router.route_for_path("/blog_post/new").kind == "show"

    def test_later_literal_route_reachable_when_declared_first(self) -> None:
        router = routes(BlogPost, "new", "show")
        assert router.route_for_path("/blog_post/new").kind == "new"
        assert router.route_for_path("/blog_post/3").kind == "show"

    def test_empty_router(self) -> None:
        with pytest.raises(NoRouteMatches):
            Router(BlogPost).route_for_path("/blog_post")


class TestCall:
    async def test_dispatches_to_matching_route(self) -> None:
        router = routes(BlogPost, "show", "index")
        assert await router.call(Request.build("/blog_post"), _KindRenderer()) == "blog_post:index"
        assert await router.call(Request.build("/blog_post/5"), _KindRenderer()) == (
            "blog_post:show"
        )

    async def test_no_match_raises(self) -> None:
        router = routes(BlogPost, "index")
        with pytest.raises(NoRouteMatches):
            await router.call(Request.build("/comment"), _KindRenderer())

    async def test_shadowed_route_surfaces_invalid_argument(self) -> None:
        router = routes(BlogPost, "show", "new")
        with pytest.raises(InvalidPathArgument):
            await router.call(Request.build("/blog_post/new"), _KindRenderer())

    async def test_custom_index_route_wraps_in_many_presenter(self) -> None:
        class PresenterRenderer:
            def render(self, resource_name: str, kind: str, presenter: Any) -> str:
                return type(presenter).__name__

        router = Router(BlogPost)
        router.route("/blog_post/all", "all", "index")
        rendered = await router.call(Request.build("/blog_post/all"), PresenterRenderer())
        assert rendered == "PresentsMany"
