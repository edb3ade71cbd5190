"""
Cleaner configuration block.

The cleaner removes stale archived records. It works on data the archiver
writes, so its schedule is validated against the archiver's one.
"""

from core.logging import get_logger
from core.schema import WireModel


logger = get_logger(__name__, subsystem="cleaner")


DFLT_CHECK_INTERVAL_SECS = 3600
DFLT_NUM_PROCESS_ITEMS_PER_TURN = 50
DFLT_MIN_AGE_DAYS_UNVISITED = 365
DFLT_STATUS_KEY = "camus_cleanup_status"

# the cleaner must run at most every other archiver turn
MIN_ARCHIVER_INTERVAL_RATIO = 2


class CleanerConf(WireModel):
    check_interval_secs: int = 0
    num_process_items_per_turn: int = 0
    min_age_days_unvisited: int = 0
    status_key: str = ""

    def validate_and_defaults(self, archiver_check_interval_secs: int) -> None:
        """
        Fill defaults and check the schedule against the archiver.

        Args:
            archiver_check_interval_secs: the archiver's (already defaulted)
                check interval
        """
        if self.check_interval_secs < 0:
            raise ValueError("checkIntervalSecs must be a non-negative number")
        if self.check_interval_secs == 0:
            self.check_interval_secs = DFLT_CHECK_INTERVAL_SECS
            logger.warning(
                "checkIntervalSecs not specified, using default",
                value=DFLT_CHECK_INTERVAL_SECS,
            )
        min_interval = MIN_ARCHIVER_INTERVAL_RATIO * archiver_check_interval_secs
        if self.check_interval_secs < min_interval:
            raise ValueError(
                f"checkIntervalSecs ({self.check_interval_secs}) must be at least "
                f"{MIN_ARCHIVER_INTERVAL_RATIO}x the archiver's checkIntervalSecs "
                f"({archiver_check_interval_secs})"
            )

        if self.num_process_items_per_turn < 0:
            raise ValueError("numProcessItemsPerTurn must be a non-negative number")
        if self.num_process_items_per_turn == 0:
            self.num_process_items_per_turn = DFLT_NUM_PROCESS_ITEMS_PER_TURN
            logger.warning(
                "numProcessItemsPerTurn not specified, using default",
                value=DFLT_NUM_PROCESS_ITEMS_PER_TURN,
            )

        if self.min_age_days_unvisited < 0:
            raise ValueError("minAgeDaysUnvisited must be a non-negative number")
        if self.min_age_days_unvisited == 0:
            self.min_age_days_unvisited = DFLT_MIN_AGE_DAYS_UNVISITED
            logger.warning(
                "minAgeDaysUnvisited not specified, using default",
                value=DFLT_MIN_AGE_DAYS_UNVISITED,
            )

        if self.status_key == "":
            self.status_key = DFLT_STATUS_KEY
            logger.warning("statusKey not specified, using default", value=DFLT_STATUS_KEY)
