from typing import Any, Dict, Iterable, Optional, Union

import orjson
from confluent_kafka import Producer
from pydantic import BaseModel

from config.settings import settings
from utils.logger_utils import get_logger

logger = get_logger("Kafka Item Exporter")


class KafkaItemExporter(object):
    """
    Publishes contract events as JSON to one Kafka topic per event type.

    URI override messages are keyed by token id, so all URI changes of one
    token land on the same partition and keep their order. Issue and batch
    issue messages carry no token id and are keyed by recipient.
    """

    def __init__(self, kafka_broker_url: str, item_type_to_topic_mapping: Dict[str, str]):
        self.kafka_broker_url = self._parse_broker_urls(kafka_broker_url)
        self.item_type_to_topic_mapping = item_type_to_topic_mapping

        conf = {
            "bootstrap.servers": self.kafka_broker_url,
            "client.id": settings.app.name.replace(" ", "-").lower() + "-kafka-producer",
            "linger.ms": settings.kafka.producer_linger_ms,
            # Events of one operation must not be reordered or duplicated by retries
            "enable.idempotence": True,
            "acks": "all",
        }
        self.producer = Producer(conf)
        logger.info(f"Initialized Confluent Kafka Producer connected to: {self.kafka_broker_url}")

    @staticmethod
    def _parse_broker_urls(broker_url: str) -> str:
        if broker_url.startswith("kafka/"):
            broker_url = broker_url[len("kafka/"):]
        return ",".join(b.strip() for b in broker_url.split(",") if b.strip())

    def open(self) -> None:
        pass

    def export_items(self, items: Iterable[Union[Dict[str, Any], BaseModel]]) -> None:
        for item in items:
            self.export_item(item)
        self.producer.poll(0)

    def export_item(self, item: Union[Dict[str, Any], BaseModel]) -> None:
        if isinstance(item, BaseModel):
            item_dict = item.model_dump(mode="json")
        else:
            item_dict = item

        item_type = item_dict.get("type")
        if item_type is None:
            logger.error(f"Cannot export item: 'type' field is missing. Item: {item_dict}")
            return

        topic = self.item_type_to_topic_mapping.get(item_type)
        if topic is None:
            logger.warning(f'Topic for item type "{item_type}" is not configured in item_type_to_topic_mapping.')
            return

        logger.debug(f"Exporting item of type '{item_type}' to topic '{topic}'")
        self._produce_with_backpressure(topic, orjson.dumps(item_dict), self._message_key(item_dict))

    @staticmethod
    def _message_key(item_dict: Dict[str, Any]) -> Optional[bytes]:
        key = item_dict.get("token_id") or item_dict.get("recipient")
        return str(key).encode("utf-8") if key is not None else None

    def _produce_with_backpressure(self, topic: str, value: bytes, key: Optional[bytes]) -> None:
        while True:
            try:
                self.producer.produce(topic, value=value, key=key, on_delivery=self._delivery_report)
                self.producer.poll(0)
                return
            except BufferError:
                logger.warning("Local Kafka queue full. Waiting...")
                self.producer.poll(0.5)

    @staticmethod
    def _delivery_report(err: Any, msg: Any = None) -> None:
        if err is not None:
            logger.error(f"Message delivery failed: {err}")

    def close(self) -> None:
        timeout = settings.kafka.producer_flush_timeout_seconds
        logger.info(f"Flushing Kafka producer (timeout={timeout}s)...")
        remaining = self.producer.flush(timeout)
        if remaining > 0:
            logger.warning(f"{remaining} messages were not delivered within {timeout}s")
        else:
            logger.info("Kafka producer closed.")
