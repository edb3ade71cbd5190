"""
Relational store (MySQL/MariaDB) configuration block.

Builds SQLAlchemy URLs so connection strings are never assembled by hand.
"""

from typing import Optional

from pydantic import field_validator
from sqlalchemy.engine import URL

from core.schema import WireModel


def split_host_port(value: str) -> tuple[str, Optional[int]]:
    """
    Split "host", "host:port", "[ipv6]" or "[ipv6]:port".

    A bare IPv6 address (more than one colon, no brackets) is taken as a
    host without port.

    Raises:
        ValueError: on a malformed port or an unterminated bracket
    """
    if value.startswith("["):
        host, sep, rest = value[1:].partition("]")
        if not sep:
            raise ValueError(f"unterminated IPv6 address in '{value}'")
        if rest == "":
            return host, None
        if not rest.startswith(":"):
            raise ValueError(f"unexpected text after IPv6 address in '{value}'")
        port = rest[1:]
    elif value.count(":") == 1:
        host, _, port = value.partition(":")
    else:
        return value, None

    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"invalid port '{port}' in '{value}'")
    return host, int(port)


class DBConf(WireModel):
    """
    The `db` block of the config file.

    `host` may carry a port ("db.example.com:3307", "[::1]:3306").
    """

    host: str = ""
    user: str = ""
    passwd: str = ""
    name: str = ""
    pool_size: int = 0

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        split_host_port(value)
        return value

    def host_and_port(self) -> tuple[str, Optional[int]]:
        return split_host_port(self.host)

    def url(self, driver: str = "mysql+pymysql") -> URL:
        """SQLAlchemy URL for the configured database."""
        host, port = self.host_and_port()
        return URL.create(
            driver,
            username=self.user or None,
            password=self.passwd or None,
            host=host or None,
            port=port,
            database=self.name or None,
        )
