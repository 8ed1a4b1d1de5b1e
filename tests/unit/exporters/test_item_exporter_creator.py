import json

import pytest
from unittest.mock import MagicMock, patch

from exporters.buffer_exporter import BufferExporter
from exporters.console_item_exporter import ConsoleItemExporter
from exporters.item_exporter_creator import (
    create_item_exporter,
    create_item_exporters,
    create_topic_mapping,
    determine_item_exporter_type,
)
from exporters.item_exporter_type import ItemExporterType
from exporters.multi_item_exporter import MultiItemExporter
from minting.models.events import IssuedEvent, OverrideSetEvent

ALICE = "0x2222222222222222222222222222222222222222"


def test_create_topic_mapping():
    assert create_topic_mapping("books") == {
        "override_set": "books.token_uris.v0",
        "issued": "books.issues.v0",
        "batch_issued": "books.batch_issues.v0",
    }


@pytest.mark.parametrize(
    "output, expected",
    [
        (None, ItemExporterType.CONSOLE),
        ("console", ItemExporterType.CONSOLE),
        ("kafka/localhost:9092", ItemExporterType.KAFKA),
        ("localhost:9092", ItemExporterType.KAFKA),
    ],
)
def test_determine_item_exporter_type(output, expected):
    assert determine_item_exporter_type(output) == expected


def test_create_kafka_exporter():
    with patch("exporters.item_exporter_creator.KafkaItemExporter") as MockExporter:
        create_item_exporter("kafka/localhost:9092", topic_prefix="books")

    MockExporter.assert_called_once_with(
        kafka_broker_url="localhost:9092",
        item_type_to_topic_mapping=create_topic_mapping("books"),
    )


def test_create_item_exporters_defaults_to_console():
    exporter = create_item_exporters(None)

    assert isinstance(exporter, MultiItemExporter)
    assert len(exporter.item_exporters) == 1
    assert isinstance(exporter.item_exporters[0], ConsoleItemExporter)


def test_console_exporter_filters_event_types(capsys):
    exporter = ConsoleItemExporter(event_types=["issued"])

    exporter.export_items(
        [
            OverrideSetEvent(token_id=1, uri="https://x/1.json"),
            IssuedEvent(recipient=ALICE, edition=0, item=1),
        ]
    )

    out = capsys.readouterr().out
    assert out.startswith("[ISSUED]: ")
    assert json.loads(out[len("[ISSUED]: "):])["recipient"] == ALICE
    assert "OVERRIDE_SET" not in out


def test_buffer_exporter_groups_by_type():
    exporter = BufferExporter()
    first = OverrideSetEvent(token_id=1, uri="u")
    second = IssuedEvent(recipient=ALICE, edition=0, item=1)

    exporter.export_items([first, second, {"type": "issued", "recipient": ALICE}])

    assert exporter.get_items("override_set") == [first]
    assert len(exporter.get_items("issued")) == 2
    assert exporter.all_items[:2] == [first, second]
    with pytest.raises(ValueError):
        exporter.export_item({"token_id": "1"})

    exporter.clear()
    assert exporter.all_items == []


def test_multi_item_exporter_fans_out():
    first, second = MagicMock(), MagicMock()
    exporter = MultiItemExporter([first, second])
    items = (item for item in [{"type": "issued"}])

    exporter.open()
    exporter.export_items(items)
    exporter.close()

    first.export_items.assert_called_once_with([{"type": "issued"}])
    second.export_items.assert_called_once_with([{"type": "issued"}])
    first.close.assert_called_once()
    second.open.assert_called_once()
