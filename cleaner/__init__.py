from cleaner.config import CleanerConf

__all__ = ["CleanerConf"]
