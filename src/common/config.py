"""Configuration loader for the binder functions."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml
from dotenv import load_dotenv

load_dotenv()

T = TypeVar('T')

CONFIG_DIR = Path(__file__).resolve().parent / "configs"


@dataclass
class DynamoConfig:
    table_name: str = "BinderArticles"
    region: str | None = None
    endpoint_url: str | None = None
    page_size: int = 100


@dataclass
class S3Config:
    bucket: str
    content_prefix: str = "articles"
    region: str | None = None
    endpoint_url: str | None = None


@dataclass
class LocalConfig:
    data_dir: str = "output"
    table_file: str = "articles.json"
    content_dir: str = "content"


@dataclass
class ParserConfig:
    mode: str = "http"  # "http" or "local"
    endpoint: str | None = None
    timeout_seconds: int = 30


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class BinderConfig:
    storage: str  # "dynamodb" or "local"
    dynamodb: DynamoConfig | None = None
    s3: S3Config | None = None
    local: LocalConfig | None = None
    parser: ParserConfig = field(default_factory=ParserConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @property
    def is_dynamodb(self) -> bool:
        return self.storage == "dynamodb"


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Find config file path, checking env var and defaults.

    Args:
        config_name: Name of config (without .yaml) or None for default
        config_dir: Directory containing config files
        default_name: Default config name if config_name is None
        env_var: Environment variable to check for config name

    Returns:
        Path to the config file

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(config_name: str | None = None, config_dir: Path = CONFIG_DIR) -> BinderConfig:
    """Load configuration from YAML file, then apply environment overrides.

    Args:
        config_name: Name of config file (without .yaml extension). Defaults to
            the BINDER_CONFIG environment variable, then "prod".
        config_dir: Directory containing config files

    Returns:
        BinderConfig instance
    """
    raw = load_yaml(find_config_path(config_name, config_dir, env_var="BINDER_CONFIG"))

    storage = raw.get("storage", "dynamodb")
    if storage not in ("dynamodb", "local"):
        raise ValueError(f"Unknown storage backend: {storage}")

    dynamo_config = None
    s3_config = None
    if storage == "dynamodb":
        dynamo_raw = raw.get("dynamodb", {})
        dynamo_config = DynamoConfig(
            table_name=os.getenv("BINDER_TABLE_NAME", dynamo_raw.get("table_name", "BinderArticles")),
            region=os.getenv("AWS_REGION", dynamo_raw.get("region")),
            endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL", dynamo_raw.get("endpoint_url")),
            page_size=dynamo_raw.get("page_size", 100),
        )
        s3_raw = raw.get("s3", {})
        s3_config = S3Config(
            bucket=os.getenv("S3_BUCKET_NAME", s3_raw.get("bucket", "binder-articles")),
            content_prefix=s3_raw.get("content_prefix", "articles"),
            region=os.getenv("AWS_REGION", s3_raw.get("region")),
            endpoint_url=os.getenv("S3_ENDPOINT_URL", s3_raw.get("endpoint_url")),
        )

    local_config = None
    if storage == "local":
        local_raw = raw.get("local", {})
        local_config = LocalConfig(
            data_dir=os.getenv("BINDER_LOCAL_DIR", local_raw.get("data_dir", "output")),
            table_file=local_raw.get("table_file", "articles.json"),
            content_dir=local_raw.get("content_dir", "content"),
        )

    parser_raw = raw.get("parser", {})
    parser_config = ParserConfig(
        mode=parser_raw.get("mode", "http"),
        endpoint=os.getenv("CONTENT_PARSER_URL", parser_raw.get("endpoint")),
        timeout_seconds=parser_raw.get("timeout_seconds", 30),
    )

    server_raw = raw.get("server", {})
    server_config = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=server_raw.get("port", 8000),
    )

    return BinderConfig(
        storage=storage,
        dynamodb=dynamo_config,
        s3=s3_config,
        local=local_config,
        parser=parser_config,
        server=server_config,
    )


class ConfigSingleton(Generic[T]):
    """Generic config singleton manager.

    Provides get/set/reset pattern for managing a global config instance.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Get the config, loading it lazily if needed."""
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Set the config directly."""
        self._config = config

    def reset(self) -> None:
        """Reset the config, forcing reload on next get()."""
        self._config = None


_manager = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
