"""
Tests for the subsystem configuration blocks.
"""

import pytest
from pydantic import ValidationError

from archiver.config import ArchiverConf, RedisConf
from cleaner.config import CleanerConf
from cncdb.config import DBConf
from indexer.config import IndexerConf
from reporting.config import ReportingConf


class TestRedisConf:
    def test_defaults(self):
        conf = RedisConf(queue_key="q")

        conf.validate_and_defaults()

        assert conf.address == "localhost:6379"
        assert conf.failed_queue_key == "q_failed"
        assert conf.failed_records_key == "q_failed_records"

    def test_explicit_values_kept(self):
        conf = RedisConf(host="redis", port=6380, queue_key="q", failed_queue_key="f")

        conf.validate_and_defaults()

        assert conf.address == "redis:6380"
        assert conf.failed_queue_key == "f"

    @pytest.mark.parametrize(
        "values, message",
        [
            ({"queue_key": ""}, "queueKey"),
            ({"queue_key": "q", "port": 70000}, "out of range"),
            ({"queue_key": "q", "db": -1}, "db"),
        ],
    )
    def test_invalid(self, values, message):
        with pytest.raises(ValueError, match=message):
            RedisConf(**values).validate_and_defaults()


class TestArchiverConf:
    def test_defaults(self):
        conf = ArchiverConf(dd_state_file_path="/tmp/dd.json")

        conf.validate_and_defaults()

        assert conf.check_interval_secs == 60
        assert conf.check_interval_chunk == 100
        assert conf.preload_last_n_items == 0

    def test_missing_state_file(self):
        with pytest.raises(ValueError, match="ddStateFilePath"):
            ArchiverConf().validate_and_defaults()

    def test_negative_interval(self):
        conf = ArchiverConf(dd_state_file_path="/tmp/dd.json", check_interval_secs=-5)

        with pytest.raises(ValueError, match="checkIntervalSecs"):
            conf.validate_and_defaults()


class TestCleanerConf:
    def test_defaults(self):
        conf = CleanerConf()

        conf.validate_and_defaults(archiver_check_interval_secs=60)

        assert conf.check_interval_secs == 3600
        assert conf.num_process_items_per_turn == 50
        assert conf.min_age_days_unvisited == 365
        assert conf.status_key == "camus_cleanup_status"

    def test_interval_at_minimum_ratio_accepted(self):
        conf = CleanerConf(check_interval_secs=120)

        conf.validate_and_defaults(archiver_check_interval_secs=60)

        assert conf.check_interval_secs == 120

    def test_interval_too_short_for_archiver(self):
        conf = CleanerConf(check_interval_secs=119)

        with pytest.raises(ValueError, match="archiver"):
            conf.validate_and_defaults(archiver_check_interval_secs=60)

    def test_default_interval_checked_against_archiver(self):
        conf = CleanerConf()

        with pytest.raises(ValueError, match="archiver"):
            conf.validate_and_defaults(archiver_check_interval_secs=3000)


class TestIndexerConf:
    def test_defaults(self):
        conf = IndexerConf(index_dir_path="/var/lib/camus/index")

        conf.validate_and_defaults()

        assert conf.doc_remove_channel == "camus_doc_remove"
        assert conf.query_history_num_preserve == 10000

    def test_missing_index_dir(self):
        with pytest.raises(ValueError, match="indexDirPath"):
            IndexerConf().validate_and_defaults()


class TestDatabaseUrls:
    def test_db_url_with_port(self):
        conf = DBConf(host="mariadb:3307", user="camus", passwd="secret", name="kontext")

        url = conf.url()

        assert url.drivername == "mysql+pymysql"
        assert url.host == "mariadb"
        assert url.port == 3307
        assert url.username == "camus"
        assert url.password == "secret"
        assert url.database == "kontext"

    def test_db_url_without_port(self):
        url = DBConf(host="mariadb", name="kontext").url()

        assert url.host == "mariadb"
        assert url.port is None
        assert url.username is None

    def test_reporting_url(self):
        conf = ReportingConf(host="ts", user="r", passwd="p", db="metrics", ssl_mode="require")

        url = conf.url()

        assert url.drivername == "postgresql+psycopg"
        assert url.port == 5432
        assert url.database == "metrics"
        assert url.query["sslmode"] == "require"

    def test_reporting_block_from_file_keys(self):
        conf = ReportingConf.model_validate({"host": "ts", "sslMode": "disable", "port": 5433})

        assert conf.ssl_mode == "disable"
        assert conf.url().port == 5433

    @pytest.mark.parametrize(
        "host, expected",
        [
            ("mariadb", ("mariadb", None)),
            ("mariadb:3307", ("mariadb", 3307)),
            ("[::1]:3306", ("::1", 3306)),
            ("[::1]", ("::1", None)),
            ("::1", ("::1", None)),
            ("", ("", None)),
        ],
    )
    def test_host_and_port_forms(self, host, expected):
        assert DBConf(host=host).host_and_port() == expected

    def test_ipv6_url(self):
        url = DBConf(host="[fd00::10]:3306", name="kontext").url()

        assert url.host == "fd00::10"
        assert url.port == 3306

    @pytest.mark.parametrize(
        "host",
        ["mariadb.local:abc", "mariadb:", "mariadb:70000", "[::1", "[::1]x3306"],
    )
    def test_malformed_host_rejected(self, host):
        with pytest.raises(ValidationError, match="host"):
            DBConf(host=host)
