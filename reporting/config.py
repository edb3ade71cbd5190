"""
Reporting sink (PostgreSQL/TimescaleDB) configuration block.
"""

from sqlalchemy.engine import URL

from core.schema import WireModel


DFLT_PORT = 5432


class ReportingConf(WireModel):
    host: str = ""
    port: int = DFLT_PORT
    user: str = ""
    passwd: str = ""
    db: str = ""
    ssl_mode: str = ""

    def url(self, driver: str = "postgresql+psycopg") -> URL:
        """SQLAlchemy URL of the reporting database."""
        query = {"sslmode": self.ssl_mode} if self.ssl_mode else {}
        return URL.create(
            driver,
            username=self.user or None,
            password=self.passwd or None,
            host=self.host or None,
            port=self.port,
            database=self.db or None,
            query=query,
        )
