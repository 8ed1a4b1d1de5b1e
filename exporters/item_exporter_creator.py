from typing import Dict, List, Optional

from config.settings import settings
from exporters.console_item_exporter import ConsoleItemExporter
from exporters.item_exporter_type import ItemExporterType
from exporters.kafka_item_exporter import KafkaItemExporter
from exporters.multi_item_exporter import MultiItemExporter
from minting.enums.event_type import EventType


def create_topic_mapping(topic_prefix: Optional[str] = None) -> Dict[str, str]:
    # Convention: {prefix}.{entity}.v0, e.g. book_editions.token_uris.v0
    prefix = topic_prefix if topic_prefix else settings.kafka.topic_prefix

    if prefix and not prefix.endswith("."):
        prefix += "."

    return {
        EventType.OVERRIDE_SET.value: f"{prefix}token_uris.v0",
        EventType.ISSUED.value: f"{prefix}issues.v0",
        EventType.BATCH_ISSUED.value: f"{prefix}batch_issues.v0",
    }


def determine_item_exporter_type(output: Optional[str]) -> ItemExporterType:
    if output is None or output == "console":
        return ItemExporterType.CONSOLE
    if output.startswith("kafka"):
        return ItemExporterType.KAFKA
    # Relaxed check: anything else is assumed to be a Kafka broker URL (e.g. localhost:9092)
    return ItemExporterType.KAFKA


def create_item_exporter(output: Optional[str], event_types: Optional[List[str]] = None, topic_prefix: Optional[str] = None):
    item_exporter_type = determine_item_exporter_type(output)

    if item_exporter_type == ItemExporterType.CONSOLE:
        return ConsoleItemExporter(event_types=event_types)

    if item_exporter_type == ItemExporterType.KAFKA:
        kafka_broker_url = output.split("/", 1)[1] if output.startswith("kafka/") else output
        if output == "kafka":
            kafka_broker_url = settings.kafka.output or ""
            if kafka_broker_url.startswith("kafka/"):
                kafka_broker_url = kafka_broker_url.split("/", 1)[1]

        if not kafka_broker_url:
            raise ValueError(f"Kafka broker URL could not be determined from output: {output}")

        return KafkaItemExporter(
            kafka_broker_url=kafka_broker_url,
            item_type_to_topic_mapping=create_topic_mapping(topic_prefix),
        )

    raise ValueError(f"Unable to determine item exporter type for output {output}")


def create_item_exporters(outputs: Optional[str], event_types: Optional[List[str]] = None, topic_prefix: Optional[str] = None):
    split_outputs = [output.strip() for output in outputs.split(",")] if outputs else ["console"]

    item_exporters = [create_item_exporter(output, event_types, topic_prefix) for output in split_outputs]
    return MultiItemExporter(item_exporters)
