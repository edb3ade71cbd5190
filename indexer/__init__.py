from indexer.config import IndexerConf

__all__ = ["IndexerConf"]
