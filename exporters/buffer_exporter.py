from typing import Any, Dict, Iterable, List, Optional


class BufferExporter(object):
    """
    Keeps exported events in memory, grouped by type and in arrival order.
    Used by tests and by callers that inspect the events of one operation.
    """

    def __init__(self, item_types: Optional[List[str]] = None):
        self.item_types: List[str] = list(item_types or [])
        self.items: Dict[str, List[Any]] = {item_type: [] for item_type in self.item_types}
        self.all_items: List[Any] = []

    def export_items(self, items: Iterable[Any]) -> None:
        for item in items:
            self.export_item(item)

    def export_item(self, item: Any) -> None:
        if isinstance(item, dict):
            item_type: Optional[str] = item.get("type")
        else:
            item_type = getattr(item, "type", None)

        if item_type is None:
            raise ValueError("type key is not found in item {}".format(repr(item)))

        self.items.setdefault(item_type, []).append(item)
        self.all_items.append(item)

    def get_items(self, item_type: str) -> List[Any]:
        return self.items.get(item_type, [])

    def clear(self) -> None:
        self.items = {item_type: [] for item_type in self.item_types}
        self.all_items = []

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass
