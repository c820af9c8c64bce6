import json
import unittest

import pandas as pd

from orchestrator import Orchestrator
from page_source import PageSource, TableHost
from table_registry import TableInstance, TableRegistry, render_all, resize_all


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw_header(self, columns, padding_count, navigation):
        self.calls.append("header")

    def draw_body(self, rows, columns, padding_count, parities):
        self.calls.append("body")

    def draw_footer(self, controls, current_page, label, long_label):
        self.calls.append("footer")


def _json_host(name, rows=3):
    payload = json.dumps(
        {
            "columns": [{"name": "a", "type": "int", "align": "right"}],
            "data": [{"a": i} for i in range(rows)],
        }
    )
    return TableHost(name=name, sources=[payload])


def _instance(name, width, rows=30, cols=12):
    df = pd.DataFrame({f"c{c}": list(range(rows)) for c in range(cols)})
    orch = Orchestrator(PageSource.from_frame(df), RecordingRenderer())
    return TableInstance(host=TableHost(name=name), orchestrator=orch, measure=lambda: width)


class RenderAllTests(unittest.TestCase):
    def test_builds_one_instance_per_valid_host(self):
        hosts = [
            _json_host("good"),
            TableHost(name="missing"),
            TableHost(name="frame", frame=pd.DataFrame({"x": [1, 2]})),
            TableHost(name="broken", sources=["{nope"]),
        ]
        renderers = {}

        def factory(index, host):
            renderer = RecordingRenderer()
            renderers[index] = renderer
            return renderer, lambda: 400

        registry = TableRegistry()
        with self.assertLogs("table_registry", level="WARNING") as logs:
            built = render_all(hosts, registry, factory)

        self.assertEqual([i.host.name for i in built], ["good", "frame"])
        self.assertEqual(len(registry), 2)
        self.assertEqual(sorted(renderers), [0, 2])
        for renderer in renderers.values():
            self.assertEqual(renderer.calls, ["header", "body", "footer"])
        self.assertEqual(len(logs.records), 2)

    def test_failing_renderer_skips_only_that_host(self):
        def factory(index, host):
            if host.name == "bad":
                raise RuntimeError("no window")
            return RecordingRenderer(), lambda: 400

        registry = TableRegistry()
        with self.assertLogs("table_registry", level="ERROR"):
            built = render_all([_json_host("bad"), _json_host("ok")], registry, factory)
        self.assertEqual([i.host.name for i in built], ["ok"])
        self.assertEqual(len(registry), 1)

    def test_replaces_previous_instances(self):
        registry = TableRegistry()
        registry.register(_instance("stale", 400))

        render_all(
            [_json_host("fresh")],
            registry,
            lambda index, host: (RecordingRenderer(), lambda: 400),
        )
        self.assertEqual([i.host.name for i in registry], ["fresh"])

    def test_renderer_body_height_becomes_capacity(self):
        class ShortRenderer(RecordingRenderer):
            def body_height(self):
                return 2

        registry = TableRegistry()
        built = render_all(
            [_json_host("short", rows=10)],
            registry,
            lambda index, host: (ShortRenderer(), lambda: 640),
        )
        resize_all(registry)
        self.assertEqual(built[0].orchestrator.rows.page_size, 2)


class ResizeAllTests(unittest.TestCase):
    def test_resizes_every_instance(self):
        registry = TableRegistry()
        first = _instance("first", 500)
        second = _instance("second", 240)
        registry.register(first)
        registry.register(second)

        resize_all(registry)

        self.assertEqual(first.orchestrator.columns.visible_count, 5)
        self.assertEqual(first.orchestrator.rows.page_size, 6)
        self.assertEqual(second.orchestrator.columns.visible_count, 2)
        self.assertEqual(second.orchestrator.rows.page_size, 3)

    def test_capacity_limits_page_size(self):
        registry = TableRegistry()
        short = _instance("short", 640)
        short.capacity = lambda: 4
        registry.register(short)

        resize_all(registry)

        self.assertEqual(short.orchestrator.rows.page_size, 4)
        self.assertEqual(short.orchestrator.columns.visible_count, 6)

    def test_failure_in_one_instance_does_not_stop_the_rest(self):
        registry = TableRegistry()

        def broken_measure():
            raise RuntimeError("detached")

        broken = _instance("broken", 0)
        broken.measure = broken_measure
        healthy = _instance("healthy", 500)
        registry.register(broken)
        registry.register(healthy)

        with self.assertLogs("table_registry", level="ERROR"):
            resize_all(registry)

        self.assertEqual(healthy.orchestrator.columns.visible_count, 5)

    def test_hidden_instance_keeps_its_state(self):
        registry = TableRegistry()
        hidden = _instance("hidden", 0)
        registry.register(hidden)

        resize_all(registry)

        self.assertEqual(hidden.orchestrator.columns.visible_count, 10)
        self.assertEqual(hidden.orchestrator.rows.page_size, 10)
        self.assertEqual(hidden.orchestrator.renderer.calls, [])


class TableRegistryTests(unittest.TestCase):
    def test_register_returns_disposer(self):
        registry = TableRegistry()
        instance = _instance("a", 100)
        dispose = registry.register(instance)
        self.assertEqual(len(registry), 1)
        dispose()
        dispose()
        self.assertEqual(len(registry), 0)

    def test_unregister_unknown_instance_is_harmless(self):
        registry = TableRegistry()
        registry.register(_instance("a", 100))
        registry.unregister(_instance("b", 100))
        self.assertEqual(len(registry), 1)


if __name__ == "__main__":
    unittest.main()
