# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import json
from typing import Any, Iterable, List

from pydantic import BaseModel


class ConsoleItemExporter(object):
    def __init__(self, event_types: List[str] | None = None):
        # Empty set means export everything
        self.allowed_event_types = set(event_types) if event_types else set()

    def open(self):
        pass

    def export_items(self, items: Iterable[Any]) -> None:
        for item in items:
            self.export_item(item)

    def export_item(self, item: Any) -> None:
        if self.allowed_event_types and self._get_item_type(item) not in self.allowed_event_types:
            return
        self._print_item(item)

    @staticmethod
    def _print_item(item):
        if isinstance(item, BaseModel):
            item_dict = item.model_dump(mode="json", exclude_none=True)
            item_type = getattr(item, "type", "unknown")
            print(f"[{item_type.upper()}]: {json.dumps(item_dict, indent=2, default=str)}")
        else:
            item_type = item.get("type", "unknown") if isinstance(item, dict) else "unknown"
            try:
                print(f"[{item_type.upper()}]: {json.dumps(item, indent=2, default=str)}")
            except TypeError:
                print(f"[{item_type.upper()}]: {str(item)}")

    @staticmethod
    def _get_item_type(item):
        """Extract item type from either Pydantic model or dict."""
        if isinstance(item, BaseModel):
            return getattr(item, "type", "unknown")
        elif isinstance(item, dict):
            return item.get("type", "unknown")
        else:
            return "unknown"

    def close(self):
        pass
