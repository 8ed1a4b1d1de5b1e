from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSection(BaseSettings):
    """Settings section reading its own flat env vars (validation_alias) from the environment and .env."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(EnvSection):
    """General application settings."""

    name: str = Field("Book Edition Tokens", validation_alias="APP_NAME")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, validation_alias="LOG_FILE")


class ContractSettings(EnvSection):
    """Settings of the locally managed book edition contract."""

    default_uri_prefix: str = Field(
        default="https://books.example.org/metadata/",
        validation_alias="DEFAULT_URI_PREFIX",
        description="Prefix of the default token URI: <prefix><token id>.json",
    )
    owner_address: Optional[str] = Field(
        default=None,
        validation_alias="CONTRACT_OWNER",
        description="Administrator address used when the contract state is initialized",
    )
    state_file: str = Field(default="book_edition_state.json", validation_alias="CONTRACT_STATE_FILE")
    collection_name: str = Field("Book Editions", validation_alias="COLLECTION_NAME")
    collection_symbol: str = Field("BOOK", validation_alias="COLLECTION_SYMBOL")


class EthereumSettings(EnvSection):
    """Settings related to Ethereum Node connection and RPC."""

    provider_uri: str = Field(
        default="https://eth-mainnet.g.alchemy.com/v2/demo",
        validation_alias="PROVIDER_URI",
        description="Ethereum Node JSON-RPC URL",
    )
    contract_address: Optional[str] = Field(
        default=None,
        validation_alias="BOOK_EDITION_CONTRACT_ADDRESS",
        description="Address of the deployed book edition contract",
    )
    # Timeout for RPC calls (seconds)
    rpc_timeout: int = Field(default=60, gt=0, validation_alias="RPC_TIMEOUT")


class KafkaSettings(EnvSection):
    """Settings for the Kafka event exporter."""

    output: Optional[str] = Field(
        default=None,
        validation_alias="KAFKA_OUTPUT",
        description="Kafka output config string, e.g. kafka/localhost:9092",
    )
    topic_prefix: str = Field("book_editions", validation_alias="KAFKA_TOPIC_PREFIX")
    producer_linger_ms: int = Field(default=100, ge=0, validation_alias="KAFKA_PRODUCER_LINGER_MS")
    producer_flush_timeout_seconds: int = Field(
        default=10, gt=0, validation_alias="KAFKA_PRODUCER_FLUSH_TIMEOUT_SECONDS"
    )


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each section reads its flat env vars itself, so nested defaults still honour the environment.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    contract: ContractSettings = Field(default_factory=ContractSettings)
    ethereum: EthereumSettings = Field(default_factory=EthereumSettings)
    kafka: KafkaSettings = Field(default_factory=KafkaSettings)

    # Config to load from .env file
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Singleton instance
settings = Settings()
