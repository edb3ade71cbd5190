"""
Service configuration file.

The configuration is a JSON document given by path at startup. It is
loaded once, defaulted and validated, and then shared read-only by all
subsystems for the rest of the process lifetime:

    conf = load_config(path)
    validate_and_defaults(conf)

Every function here raises a ConfigError subclass on failure; deciding to
terminate the process is left to core.bootstrap.
"""

from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, PrivateAttr, ValidationError

from archiver.config import ArchiverConf, RedisConf
from cleaner.config import CleanerConf
from cncdb.config import DBConf
from core.errors import ConfigLoadError, ConfigParseError, ConfigValidationError
from core.logging import LoggingConf, get_logger
from core.schema import WireModel
from indexer.config import IndexerConf
from reporting.config import ReportingConf


logger = get_logger(__name__)


DFLT_SERVER_WRITE_TIMEOUT_SECS = 30
DFLT_TIME_ZONE = "Europe/Prague"


class Conf(WireModel):
    """
    Root of the configuration document.

    Attributes mirror the camelCase keys of the file. Sub-config blocks
    are owned by their subsystems and validated by them.
    """

    _src_path: str = PrivateAttr(default="")

    listen_address: str
    public_url: str = ""
    listen_port: int
    server_read_timeout_secs: int = 0
    server_write_timeout_secs: int = 0
    cors_allowed_origins: list[str] = Field(default_factory=list)
    time_zone: str = ""
    auth_header_name: str = ""
    auth_tokens: list[str] = Field(default_factory=list)
    logging: LoggingConf
    redis: RedisConf
    db: DBConf
    archiver: ArchiverConf
    indexer: IndexerConf
    cleaner: CleanerConf = Field(default_factory=CleanerConf)
    reporting: ReportingConf

    @property
    def src_path(self) -> str:
        """Path the document was loaded from (not part of the file schema)."""
        return self._src_path

    def timezone_location(self) -> ZoneInfo:
        """
        Resolve the configured time zone.

        Meant to be called on a validated config. On an unvalidated one
        with an unknown zone it raises ConfigValidationError.
        """
        return resolve_time_zone(self.time_zone)

    def to_json(self) -> str:
        """Serialize back to the file format (src_path is not included)."""
        return self.model_dump_json(by_alias=True, indent=2)


def resolve_time_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as err:
        raise ConfigValidationError(
            f"unknown time zone '{name}'", field="timeZone"
        ) from err


def read_config_file(path: str) -> bytes:
    """Read raw config data. No retries; a missing file is a deployment error."""
    if not path:
        raise ConfigLoadError("Cannot load config - path not specified")
    try:
        return Path(path).read_bytes()
    except OSError as err:
        raise ConfigLoadError(f"Cannot load config {path}: {err}", path=path) from err


def parse_config(raw: bytes | str, src_path: str = "") -> Conf:
    """
    Deserialize a JSON document into Conf.

    Types are checked strictly ("listenPort": "8080" is an error).
    Unknown keys are ignored, omitted optional keys keep their zero value.
    """
    try:
        conf = Conf.model_validate_json(raw, strict=True)
    except ValidationError as err:
        raise ConfigParseError(
            f"Cannot load config {src_path}: {err}", path=src_path
        ) from err
    conf._src_path = src_path
    return conf


def load_config(path: str) -> Conf:
    return parse_config(read_config_file(path), src_path=path)


def apply_defaults(conf: Conf) -> None:
    """Fill omitted top-level values in place, logging each substitution."""
    if conf.server_write_timeout_secs == 0:
        conf.server_write_timeout_secs = DFLT_SERVER_WRITE_TIMEOUT_SECS
        logger.warning(
            "serverWriteTimeoutSecs not specified, using default",
            value=DFLT_SERVER_WRITE_TIMEOUT_SECS,
        )
    if conf.public_url == "":
        conf.public_url = f"http://{conf.listen_address}"
        logger.warning("publicUrl not set, using listenAddress", address=conf.public_url)
    if conf.time_zone == "":
        conf.time_zone = DFLT_TIME_ZONE
        logger.warning("time zone not specified, using default", timeZone=DFLT_TIME_ZONE)


def validate(conf: Conf) -> None:
    """
    Check the defaulted document, stopping at the first failure.

    Sub-configs fill their own defaults while being validated. The cleaner
    runs after the archiver because it is checked against the archiver's
    (defaulted) check interval.
    """
    resolve_time_zone(conf.time_zone)

    if conf.server_write_timeout_secs <= 0:
        raise ConfigValidationError(
            "must be a positive number of seconds", field="serverWriteTimeoutSecs"
        )
    if conf.server_read_timeout_secs < 0:
        raise ConfigValidationError(
            "must be a non-negative number of seconds", field="serverReadTimeoutSecs"
        )

    try:
        conf.redis.validate_and_defaults()
    except ValueError as err:
        raise ConfigValidationError(str(err), subsystem="redis") from err

    try:
        conf.archiver.validate_and_defaults()
    except ValueError as err:
        raise ConfigValidationError(str(err), subsystem="archiver") from err

    try:
        conf.cleaner.validate_and_defaults(conf.archiver.check_interval_secs)
    except ValueError as err:
        raise ConfigValidationError(str(err), subsystem="cleaner") from err

    try:
        conf.indexer.validate_and_defaults()
    except ValueError as err:
        raise ConfigValidationError(str(err), subsystem="indexer") from err


def validate_and_defaults(conf: Conf) -> None:
    apply_defaults(conf)
    validate(conf)
