from cncdb.config import DBConf

__all__ = ["DBConf"]
