"""
Archiver subsystem - configuration of the record queue and archiving loop.
"""

from archiver.config import ArchiverConf, RedisConf

__all__ = ["ArchiverConf", "RedisConf"]
