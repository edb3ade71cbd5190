"""
Indexer configuration block.
"""

from core.logging import get_logger
from core.schema import WireModel


logger = get_logger(__name__, subsystem="indexer")


DFLT_DOC_REMOVE_CHANNEL = "camus_doc_remove"
DFLT_QUERY_HISTORY_NUM_PRESERVE = 10000


class IndexerConf(WireModel):
    """Full-text index of query history records."""

    index_dir_path: str = ""
    doc_remove_channel: str = ""
    query_history_num_preserve: int = 0

    def validate_and_defaults(self) -> None:
        if self.index_dir_path == "":
            raise ValueError("missing indexDirPath")
        if self.doc_remove_channel == "":
            self.doc_remove_channel = DFLT_DOC_REMOVE_CHANNEL
            logger.warning(
                "docRemoveChannel not specified, using default",
                value=DFLT_DOC_REMOVE_CHANNEL,
            )
        if self.query_history_num_preserve < 0:
            raise ValueError("queryHistoryNumPreserve must be a non-negative number")
        if self.query_history_num_preserve == 0:
            self.query_history_num_preserve = DFLT_QUERY_HISTORY_NUM_PRESERVE
            logger.warning(
                "queryHistoryNumPreserve not specified, using default",
                value=DFLT_QUERY_HISTORY_NUM_PRESERVE,
            )
