from typing import Any, Iterable, List


class MultiItemExporter(object):
    """Fans every event out to several exporters, in the order they were given."""

    def __init__(self, item_exporters: List[Any]):
        self.item_exporters = item_exporters

    def open(self) -> None:
        for exporter in self.item_exporters:
            exporter.open()

    def export_items(self, items: Iterable[Any]) -> None:
        items = list(items)
        for exporter in self.item_exporters:
            exporter.export_items(items)

    def export_item(self, item: Any) -> None:
        for exporter in self.item_exporters:
            exporter.export_item(item)

    def close(self) -> None:
        for exporter in self.item_exporters:
            exporter.close()
