from reporting.config import ReportingConf

__all__ = ["ReportingConf"]
