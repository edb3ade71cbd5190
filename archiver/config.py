"""
Archiver configuration blocks.

The archiver consumes query records from a Redis queue and writes them
to the relational store. Both the queue connection (`redis`) and the
archiving schedule (`archiver`) are configured here.
"""

from core.logging import get_logger
from core.schema import WireModel


logger = get_logger(__name__, subsystem="archiver")


DFLT_REDIS_HOST = "localhost"
DFLT_REDIS_PORT = 6379
DFLT_CHECK_INTERVAL_SECS = 60
DFLT_CHECK_INTERVAL_CHUNK = 100


class RedisConf(WireModel):
    """Connection to the Redis instance holding the record queues."""

    host: str = ""
    port: int = 0
    db: int = 0
    password: str = ""
    queue_key: str = ""
    failed_queue_key: str = ""
    failed_records_key: str = ""

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    def validate_and_defaults(self) -> None:
        """Fill missing connection values, raise ValueError on invalid ones."""
        if self.host == "":
            self.host = DFLT_REDIS_HOST
            logger.warning("redis host not specified, using default", host=self.host)
        if self.port == 0:
            self.port = DFLT_REDIS_PORT
            logger.warning("redis port not specified, using default", port=self.port)
        if not 0 < self.port < 65536:
            raise ValueError(f"port {self.port} out of range")
        if self.db < 0:
            raise ValueError(f"db must be a non-negative number, got {self.db}")
        if self.queue_key == "":
            raise ValueError("missing queueKey")
        if self.failed_queue_key == "":
            self.failed_queue_key = f"{self.queue_key}_failed"
            logger.warning(
                "failedQueueKey not specified, using default",
                failedQueueKey=self.failed_queue_key,
            )
        if self.failed_records_key == "":
            self.failed_records_key = f"{self.queue_key}_failed_records"
            logger.warning(
                "failedRecordsKey not specified, using default",
                failedRecordsKey=self.failed_records_key,
            )


class ArchiverConf(WireModel):
    """Schedule and state of the archiving loop."""

    dd_state_file_path: str = ""
    check_interval_secs: int = 0
    check_interval_chunk: int = 0
    preload_last_n_items: int = 0

    def validate_and_defaults(self) -> None:
        if self.dd_state_file_path == "":
            raise ValueError("missing ddStateFilePath")
        if self.check_interval_secs < 0:
            raise ValueError("checkIntervalSecs must be a non-negative number")
        if self.check_interval_secs == 0:
            self.check_interval_secs = DFLT_CHECK_INTERVAL_SECS
            logger.warning(
                "checkIntervalSecs not specified, using default",
                value=DFLT_CHECK_INTERVAL_SECS,
            )
        if self.check_interval_chunk < 0:
            raise ValueError("checkIntervalChunk must be a non-negative number")
        if self.check_interval_chunk == 0:
            self.check_interval_chunk = DFLT_CHECK_INTERVAL_CHUNK
            logger.warning(
                "checkIntervalChunk not specified, using default",
                value=DFLT_CHECK_INTERVAL_CHUNK,
            )
        if self.preload_last_n_items < 0:
            raise ValueError("preloadLastNItems must be a non-negative number")
