"""Tests for jsrouting.exposure — opt-in route exposure per group."""

import pytest

from jsrouting.exposure import exposed_routes, is_exposed
from jsrouting.routing.route import Route
from jsrouting.sources import ExposureConfig


def _routes() -> dict[str, Route]:
    return {
        "home": Route("/", name="home"),
        "admin": Route("/admin", name="admin"),
        "blog_show": Route("/blog/{slug}", name="blog_show"),
    }


def _config(routes_to_expose: dict[str, object]) -> ExposureConfig:
    return ExposureConfig(routes_to_expose=routes_to_expose)


class TestIsExposed:
    def test_true_admits_every_group(self) -> None:
        assert is_exposed(True, "default")
        assert is_exposed(True, "staff")
        assert is_exposed(True, "")

    def test_list_admits_members_only(self) -> None:
        assert is_exposed(["a", "b"], "a")
        assert is_exposed(["a", "b"], "b")
        assert not is_exposed(["a", "b"], "c")

    def test_tuple_and_set(self) -> None:
        assert is_exposed(("staff",), "staff")
        assert is_exposed({"staff"}, "staff")

    @pytest.mark.parametrize("entry", [False, None, "staff", 1, {"staff": True}])
    def test_other_shapes_admit_nobody(self, entry: object) -> None:
        assert not is_exposed(entry, "staff")

    def test_truthy_non_bool_is_not_true(self) -> None:
        assert not is_exposed(1, "default")


class TestExposedRoutes:
    def test_unlisted_routes_are_excluded(self) -> None:
        result = exposed_routes(_routes(), _config({"home": True}), "default")
        assert list(result) == ["home"]

    def test_empty_config_exposes_nothing(self) -> None:
        assert exposed_routes(_routes(), ExposureConfig(), "default") == {}

    def test_true_exposes_to_unknown_and_empty_groups(self) -> None:
        config = _config({"home": True})
        assert "home" in exposed_routes(_routes(), config, "nobody-knows-me")
        assert "home" in exposed_routes(_routes(), config, "")

    def test_group_list(self) -> None:
        config = _config({"admin": ["a", "b"]})
        assert "admin" in exposed_routes(_routes(), config, "a")
        assert "admin" in exposed_routes(_routes(), config, "b")
        assert "admin" not in exposed_routes(_routes(), config, "c")

    def test_default_and_staff_scenario(self) -> None:
        routes = {"home": Route("/", name="home"), "admin": Route("/admin", name="admin")}
        config = _config({"home": True, "admin": ["staff"]})

        assert list(exposed_routes(routes, config, "default")) == ["home"]
        assert list(exposed_routes(routes, config, "staff")) == ["home", "admin"]

    def test_registration_order_is_kept(self) -> None:
        config = _config({"blog_show": True, "home": True, "admin": True})
        assert list(exposed_routes(_routes(), config, "default")) == ["home", "admin", "blog_show"]

    def test_malformed_entry_is_skipped_silently(self) -> None:
        config = _config({"home": "yes", "admin": True})
        assert list(exposed_routes(_routes(), config, "default")) == ["admin"]

    def test_accepts_pairs(self) -> None:
        pairs = list(_routes().items())
        result = exposed_routes(pairs, _config({"admin": True}), "default")
        assert result == {"admin": pairs[1][1]}

    def test_legacy_expose_option_is_not_consulted(self) -> None:
        routes = {"hidden": Route("/hidden", name="hidden", options={"expose": True})}
        assert exposed_routes(routes, ExposureConfig(), "default") == {}

    def test_result_is_a_fresh_dict(self) -> None:
        routes = _routes()
        config = _config({"home": True})
        first = exposed_routes(routes, config, "default")
        first["extra"] = Route("/x")
        assert "extra" not in exposed_routes(routes, config, "default")
