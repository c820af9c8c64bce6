import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence

from config_paths import TableConfig
from orchestrator import Orchestrator
from page_source import ConfigurationError, PageSource, TableHost

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TableInstance:
    host: TableHost
    orchestrator: Orchestrator
    measure: Callable[[], int]  # current viewport width in px
    capacity: Optional[Callable[[], int]] = None  # body rows the renderer fits

    def resize(self):
        body_rows = self.capacity() if self.capacity is not None else None
        self.orchestrator.resize(self.measure(), body_rows)


class TableRegistry:
    """Live table instances owned by whoever composes the screen."""

    def __init__(self):
        self._instances: list[TableInstance] = []

    def register(self, instance: TableInstance) -> Callable[[], None]:
        self._instances.append(instance)
        return lambda: self.unregister(instance)

    def unregister(self, instance: TableInstance) -> None:
        if instance in self._instances:
            self._instances.remove(instance)

    def clear(self) -> None:
        self._instances = []

    def __iter__(self) -> Iterator[TableInstance]:
        return iter(list(self._instances))

    def __len__(self) -> int:
        return len(self._instances)


def render_all(
    hosts: Sequence[TableHost],
    registry: TableRegistry,
    renderer_factory: Callable,
    config: TableConfig | None = None,
) -> list[TableInstance]:
    """Build and draw one table per host, replacing whatever was registered.

    ``renderer_factory(index, host)`` returns ``(renderer, measure)``. A
    renderer with a ``body_height()`` method also caps the page size at the
    rows it can show. A host whose source is missing or malformed is logged
    and skipped; it never reaches the registry.
    """
    registry.clear()
    built: list[TableInstance] = []
    for idx, host in enumerate(hosts):
        try:
            source = PageSource.from_host(host)
        except ConfigurationError as exc:
            logger.warning("skipping table %s: %s", host.name, exc)
            continue
        try:
            renderer, measure = renderer_factory(idx, host)
            orchestrator = Orchestrator(source, renderer, config)
            orchestrator.render()
        except Exception:
            logger.exception("failed to render table %s", host.name)
            continue
        instance = TableInstance(
            host=host,
            orchestrator=orchestrator,
            measure=measure,
            capacity=getattr(renderer, "body_height", None),
        )
        registry.register(instance)
        built.append(instance)
    return built


def resize_all(registry: TableRegistry) -> None:
    for instance in registry:
        try:
            instance.resize()
        except Exception:
            # one broken table must not stop the others from resizing
            logger.exception("resize failed for table %s", instance.host.name)
