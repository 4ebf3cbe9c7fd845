"""Tests for bifrost.group and bifrost.factory."""

import pytest

from bifrost.exceptions import InvalidArgument, NoCurrentRoute
from bifrost.factory import RouteFactory
from bifrost.group import RouteGroup
from bifrost.route import Route
from bifrost.router import Router


class TaggedRoute(Route):
    __slots__ = ()


class TaggedFactory(RouteFactory):
    def make(self, pattern, action=None, methods=(), parameters=()):
        return TaggedRoute(pattern, action, methods, parameters)


class TestRouteFactory:
    def test_make(self) -> None:
        route = RouteFactory().make("/foo", "FooAction", ["GET"], {"id": 1})
        assert isinstance(route, Route)
        assert route.pattern == "/foo"
        assert route.action == "FooAction"
        assert route.methods == ("GET",)
        assert route.get_named_parameter("id") == 1


class TestRouteGroup:
    def test_route_registers(self, group: RouteGroup, router: Router) -> None:
        assert group.route("/foo/bar") is group
        assert group.current_id == 0
        assert router.get_route(0) is group.current_route
        assert group.current_route.pattern == "/foo/bar"

    def test_route_with_all_arguments(self, group: RouteGroup, router: Router) -> None:
        group.route("/foo/bar", "FooAction", ["GET", "POST"])
        route = group.current_route
        assert route.action == "FooAction"
        assert route.methods == ("GET", "POST")
        assert router.match("/foo/bar", "POST").route is route

    def test_chaining(self, group: RouteGroup, router: Router) -> None:
        group.route("/foo/bar").to_action("FooAction").from_method("GET")
        result = router.match("/foo/bar", "GET")
        assert result.route.action == "FooAction"

    def test_from_methods(self, group: RouteGroup) -> None:
        group.route("/foo/bar").from_methods(["GET", "POST"])
        assert group.current_route.methods == ("GET", "POST")

    @pytest.mark.parametrize("value", [False, None, 2**63 - 1, 2093.211092, object(), []])
    def test_route_pattern_must_be_string(self, group: RouteGroup, value: object) -> None:
        with pytest.raises(InvalidArgument):
            group.route(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [False, None, 42, ["GET"]])
    def test_from_method_must_be_string(self, group: RouteGroup, value: object) -> None:
        with pytest.raises(InvalidArgument):
            group.route("/foo/bar").from_method(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [False, None, 42, ["/foo"]])
    def test_prefix_must_be_string(self, group: RouteGroup, value: object) -> None:
        with pytest.raises(InvalidArgument):
            group.set_prefix(value)  # type: ignore[arg-type]

    def test_rejected_route_is_not_registered(
        self, group: RouteGroup, router: Router
    ) -> None:
        with pytest.raises(InvalidArgument):
            group.route("/a", methods="GET")  # type: ignore[arg-type]
        assert len(router) == 0
        assert group.current_route is None
        assert group.current_id is None

    def test_default_methods_must_be_iterable(self, group: RouteGroup) -> None:
        with pytest.raises(InvalidArgument):
            group.set_default_methods("GET")

    def test_no_current_route(self, group: RouteGroup) -> None:
        with pytest.raises(NoCurrentRoute):
            group.to_action("FooAction")
        with pytest.raises(NoCurrentRoute):
            group.from_methods(["GET"])
        with pytest.raises(NoCurrentRoute):
            group.from_method("GET")

    def test_prefix(self, group: RouteGroup, router: Router) -> None:
        group.set_prefix("/admin").route("/users", methods=["GET"])
        assert group.current_route.pattern == "/admin/users"
        assert router.match("/admin/users").route is group.current_route

    def test_defaults_apply_prospectively(self, group: RouteGroup) -> None:
        group.route("/before")
        before = group.current_route
        group.set_default_action("Default").set_default_methods(["GET"])
        group.set_prefix("/p")
        group.route("/after")
        after = group.current_route

        assert before.action is None
        assert before.methods == ()
        assert before.pattern == "/before"
        assert after.action == "Default"
        assert after.methods == ("GET",)
        assert after.pattern == "/p/after"

    def test_explicit_values_override_defaults(self, group: RouteGroup) -> None:
        group.set_default_action("Default").set_default_methods(["GET"])
        group.route("/foo", "Explicit", ["PUT"])
        assert group.current_route.action == "Explicit"
        assert group.current_route.methods == ("PUT",)

    def test_create_group_shares_router(self, group: RouteGroup, router: Router) -> None:
        group.set_prefix("/a").set_default_methods(["GET"])
        child = group.create_group()
        assert child.router is router
        assert child.prefix == ""
        assert child.current_route is None

        group.route("/x")
        child.route("/x", methods=["GET"])
        group.route("/y")
        assert [route.pattern for route in router.routes.values()] == [
            "/a/x",
            "/x",
            "/a/y",
        ]

    def test_custom_factory(self, router: Router) -> None:
        group = RouteGroup(router, TaggedFactory())
        group.route("/foo")
        assert isinstance(group.current_route, TaggedRoute)
        assert isinstance(group.create_group().route("/bar").current_route, TaggedRoute)


class TestDecorators:
    def test_get(self, group: RouteGroup, router: Router) -> None:
        @group.get("/deco")
        def handler() -> str:
            return "ok"

        result = router.match("/deco", "GET")
        assert result.route.action is handler
        assert handler() == "ok"

    def test_method_shortcuts(self, group: RouteGroup, router: Router) -> None:
        for method in ("post", "put", "patch", "delete"):
            @getattr(group, method)(f"/{method}")
            def handler() -> None: ...

            assert router.match(f"/{method}", method).route.action is handler

    def test_handle_uses_defaults(self, group: RouteGroup, router: Router) -> None:
        group.set_default_methods(["GET", "HEAD"])

        @group.handle("/things/:id")
        def show_thing() -> None: ...

        result = router.match("/things/9", "HEAD")
        assert result.route.action is show_thing
        assert result.get_named_parameter("id") == "9"
