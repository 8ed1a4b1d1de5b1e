import orjson
import pytest
from unittest.mock import patch

from exporters.kafka_item_exporter import KafkaItemExporter
from minting.models.events import BatchIssuedEvent, IssuedEvent, OverrideSetEvent

ALICE = "0x2222222222222222222222222222222222222222"
TOPICS = {"override_set": "book_editions.token_uris.v0", "batch_issued": "book_editions.batch_issues.v0"}


@pytest.fixture
def mock_producer():
    with patch("exporters.kafka_item_exporter.Producer") as MockProducer:
        yield MockProducer.return_value


def test_producer_config():
    with patch("exporters.kafka_item_exporter.Producer") as MockProducer:
        exporter = KafkaItemExporter("kafka/broker-1:9092, broker-2:9092", TOPICS)

    conf = MockProducer.call_args.args[0]
    assert exporter.kafka_broker_url == "broker-1:9092,broker-2:9092"
    assert conf["bootstrap.servers"] == "broker-1:9092,broker-2:9092"
    assert conf["enable.idempotence"] is True
    assert conf["acks"] == "all"


def test_export_override_event_keyed_by_token_id(mock_producer):
    exporter = KafkaItemExporter("localhost:9092", TOPICS)

    exporter.export_item(OverrideSetEvent(token_id=2**255, uri="ipfs://x.json"))

    mock_producer.produce.assert_called_once()
    call = mock_producer.produce.call_args
    assert call.args[0] == "book_editions.token_uris.v0"
    assert call.kwargs["key"] == str(2**255).encode("utf-8")
    payload = orjson.loads(call.kwargs["value"])
    assert payload["token_id"] == str(2**255)
    assert payload["uri"] == "ipfs://x.json"


def test_export_batch_event_keyed_by_recipient(mock_producer):
    exporter = KafkaItemExporter("localhost:9092", TOPICS)

    exporter.export_items([BatchIssuedEvent(recipient=ALICE, editions=[1], items=[2])])

    call = mock_producer.produce.call_args
    assert call.args[0] == "book_editions.batch_issues.v0"
    assert call.kwargs["key"] == ALICE.encode("utf-8")


def test_export_item_missing_type(mock_producer):
    exporter = KafkaItemExporter("localhost:9092", TOPICS)

    exporter.export_item({"token_id": "1"})

    mock_producer.produce.assert_not_called()


def test_export_item_unconfigured_topic(mock_producer):
    exporter = KafkaItemExporter("localhost:9092", TOPICS)

    exporter.export_item({"type": "issued", "recipient": ALICE})

    mock_producer.produce.assert_not_called()


def test_full_queue_is_retried(mock_producer):
    mock_producer.produce.side_effect = [BufferError(), None]
    exporter = KafkaItemExporter("localhost:9092", TOPICS)

    exporter.export_item(OverrideSetEvent(token_id=1, uri="u"))

    assert mock_producer.produce.call_count == 2
    mock_producer.poll.assert_any_call(0.5)


def test_close_flushes(mock_producer):
    mock_producer.flush.return_value = 0
    exporter = KafkaItemExporter("localhost:9092", TOPICS)

    exporter.close()

    mock_producer.flush.assert_called_once()


def test_issued_event_keyed_by_recipient(mock_producer):
    exporter = KafkaItemExporter("localhost:9092", {"issued": "book_editions.issues.v0"})

    exporter.export_item(IssuedEvent(recipient=ALICE, edition=1, item=1))

    assert mock_producer.produce.call_args.kwargs["key"] == ALICE.encode("utf-8")
