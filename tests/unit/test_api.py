"""Tests for the host-facing visualization API."""

import pytest

from app.container import container
from app.hooks import DELETE_FORM, HookRegistry
from app.session import StaticSession
from web.api import visualizations as api
from web.api.errors import NotFoundError, ValidationError


@pytest.fixture(autouse=True)
def wired(conn):
    container.init(conn=conn, force=True)
    return container


class TestQuicklinks:
    def test_response(self, seed):
        seed.vis(1, access_type="public")
        seed.vis(2, access_type="admin")

        resp = api.get_quicklink_visualizations(1, 10, StaticSession(7, "client"))

        assert resp.form_id == 1
        assert resp.view_id == 10
        assert resp.vis_ids == [1]

    @pytest.mark.parametrize("form_id,view_id", [(0, 10), (1, -3), ("1", 10)])
    def test_invalid_ids(self, form_id, view_id):
        with pytest.raises(ValidationError):
            api.get_quicklink_visualizations(form_id, view_id, StaticSession(1))


class TestScripts:
    def test_mapping_js(self, seed):
        seed.form(1, "Contact")
        seed.view(10, 1, "All")
        js = api.get_form_view_mapping_js()
        assert 'page_ns.form_views.push([1,[[10, "All"]]])' in js

    def test_messages_default_language(self):
        assert api.get_vis_messages().startswith("g.vis_messages = {};")

    def test_messages_unknown_language(self):
        with pytest.raises(NotFoundError):
            api.get_vis_messages("xx_yy")


class TestDeleteFormHook:
    def test_fires_cascade(self, seed):
        seed.vis(5, form_id=3)
        seed.cache(5)

        api.delete_form_hook({"form_id": 3})

        assert seed.count("module_data_visualizations") == 0
        assert seed.count("module_data_visualization_cache") == 0

    def test_malformed_payload_ignored(self, seed):
        seed.vis(5, form_id=3)
        api.delete_form_hook({"form_id": "three"})
        assert seed.count("module_data_visualizations") == 1


class TestCacheEndpoints:
    def test_write_then_read(self):
        write = api.update_visualization_cache(5, {"values": [3, 4]})
        assert write.ok

        read = api.get_visualization_cache(5)
        assert read.vis_id == 5
        assert read.data == {"values": [3, 4]}

    def test_read_missing(self):
        with pytest.raises(NotFoundError):
            api.get_visualization_cache(5)

    def test_write_failure_reported(self):
        resp = api.update_visualization_cache(5, {"bad": {1, 2}})
        assert not resp.ok
        assert resp.error

    @pytest.mark.parametrize("vis_id", [0, -4, True])
    def test_invalid_vis_id_reported_not_raised(self, seed, vis_id):
        resp = api.update_visualization_cache(vis_id, {"a": 1})

        assert resp.ok is False
        assert "vis_id" in resp.error
        assert seed.count("module_data_visualization_cache") == 0

    def test_non_int_vis_id_reported_not_raised(self):
        resp = api.update_visualization_cache("5", {"a": 1})

        assert resp.ok is False
        assert resp.vis_id == 0

    def test_invalid_vis_id_on_read(self):
        with pytest.raises(ValidationError):
            api.get_visualization_cache(0)


class TestHookRegistry:
    def test_fire_in_order(self):
        calls = []
        hooks = HookRegistry()
        hooks.register(DELETE_FORM, lambda info: calls.append(("a", info["form_id"])))
        hooks.register(DELETE_FORM, lambda info: calls.append(("b", info["form_id"])))

        assert hooks.fire(DELETE_FORM, {"form_id": 4}) == 2
        assert calls == [("a", 4), ("b", 4)]

    def test_unknown_event(self):
        assert HookRegistry().fire("add_form", {}) == 0

    def test_errors_propagate(self):
        def broken(info):
            raise ValueError("bad hook")

        hooks = HookRegistry()
        hooks.register(DELETE_FORM, broken)
        with pytest.raises(ValueError):
            hooks.fire(DELETE_FORM, {"form_id": 1})
