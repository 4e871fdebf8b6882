"""Demo step catalogs: the built-in OpenData walkthrough and TOML catalogs."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .config import DemoTourConfig
from .errors import CatalogError
from .models import Step

logger = logging.getLogger(__name__)

_LOCAL_DEVELOPMENT = """\
# Start OpenData Log locally
$ docker run -p 8080:8080 opendata/log:latest

# Write a message
$ curl -X POST http://localhost:8080/v1/topics/events/messages \\
    -H "Content-Type: application/json" \\
    -d '{"value": "hello, opendata"}'

{"offset": 0, "topic": "events"}

# Read it back
$ curl http://localhost:8080/v1/topics/events/messages?offset=0

{"messages": [{"offset": 0, "value": "hello, opendata"}]}"""

_CLOUD_STORAGE = """\
# Before: local disk
[storage]
backend = "local"
path = "/data/opendata-log"

# After: cloud object storage
[storage]
backend = "s3"
bucket = "my-opendata-bucket"
region = "us-east-1"

# Everything else stays the same.
# Same container. Same API. Same data format."""

_PRODUCTION = """\
services:
  opendata-log:
    image: opendata/log:latest
    ports:
      - "8080:8080"
      - "9090:9090"  # metrics
    environment:
      OPENDATA_STORAGE_BACKEND: s3
      OPENDATA_STORAGE_BUCKET: my-opendata-bucket
      OPENDATA_STORAGE_REGION: us-east-1
    # TODO: Add resource limits, health checks

  prometheus:
    image: prom/prometheus:latest
    volumes:
      - ./prometheus.yml:/etc/prometheus/prometheus.yml
    # Scrape opendata-log:9090/metrics"""

_SCALE = """\
# Scale up read replicas
$ opendata scale log --readers 3

Scaling opendata-log readers: 1 → 3
  ✓ Reader replica 2 started
  ✓ Reader replica 3 started
  ✓ Load balancer updated

# Check cluster status
$ opendata status log

opendata-log
  Writers:  1 (active)
  Readers:  3 (healthy)
  Storage:  s3://my-opendata-bucket
  Lag:      < 100ms"""

_ANOTHER_DATABASE = """\
# Same pattern, different database
$ docker run -p 8081:8080 \\
    -e OPENDATA_STORAGE_BACKEND=s3 \\
    -e OPENDATA_STORAGE_BUCKET=my-opendata-bucket \\
    opendata/timeseries:latest

# Write Prometheus metrics
$ curl -X POST http://localhost:8081/api/v1/write \\
    --data-binary @metrics.prom

# Query with PromQL — it's Prometheus-compatible
$ curl http://localhost:8081/api/v1/query \\
    -d 'query=rate(http_requests_total[5m])'

# Same CLI, same scaling model
$ opendata scale timeseries --readers 2"""

DEFAULT_STEPS: tuple[Step, ...] = (
    Step(
        title="Local Development",
        description=(
            "Start OpenData Log locally with a single command. Data is stored on local disk. "
            "No dependencies, no setup. Write a message and read it back."
        ),
        code_title="terminal",
        code=_LOCAL_DEVELOPMENT,
    ),
    Step(
        title="Move to Cloud Storage",
        description=(
            "Change one config value. You now have 11 nines of durability with replicated "
            "object storage. No MinIO, no local S3 emulation: SlateDB makes local disk "
            "and object storage interchangeable."
        ),
        code_title="opendata.toml",
        code=_CLOUD_STORAGE,
    ),
    Step(
        title="Deploy to Production",
        description=(
            "Same container image, same metrics, same operational model as your laptop. "
            "Add a Prometheus scrape config and you have full observability."
        ),
        code_title="docker-compose.yml",
        code=_PRODUCTION,
    ),
    Step(
        title="Scale",
        description=(
            "Add read replicas with a single command. Readers and writers are stateless and "
            "decoupled: no rebalancing, no leader election, no data migration. The CLI "
            "is shared across all OpenData databases."
        ),
        code_title="terminal",
        code=_SCALE,
    ),
    Step(
        title="Add Another Database",
        description=(
            "Deploy OpenData Timeseries with the exact same pattern. Same [bold]docker run[/bold], "
            "same storage config, same CLI, same Prometheus metrics. "
            "You already know how to operate this."
        ),
        code_title="terminal",
        code=_ANOTHER_DATABASE,
    ),
)


class CatalogFile(BaseModel):
    """Schema of a TOML catalog file."""

    steps: list[Step] = Field(default_factory=list)


def load_catalog(path: Path) -> tuple[Step, ...]:
    """Load demo steps from a TOML file of ``[[steps]]`` tables.

    Args:
        path: Path to the catalog file

    Returns:
        Steps in file order

    Raises:
        CatalogError: If the file is missing, malformed, or has no steps
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Catalog not found: {path}") from None
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    try:
        catalog = CatalogFile.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e

    if not catalog.steps:
        raise CatalogError(f"Catalog has no steps: {path}")

    logger.info(f"Loaded {len(catalog.steps)} step(s) from {path}")
    return tuple(catalog.steps)


def resolve_catalog(config: DemoTourConfig, override: Path | None = None) -> tuple[Step, ...]:
    """Pick the catalog to show: explicit override, configured path, or built-in steps."""
    if override is not None:
        return load_catalog(override)
    if config.catalog.path:
        return load_catalog(Path(config.catalog.path))
    return DEFAULT_STEPS
