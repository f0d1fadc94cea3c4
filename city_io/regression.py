"""Fixed regression cases for the maximum traffic computation."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from traffic_engine.batch import TrafficBatch
from .descriptions import parse_descriptions
from .results import serialize_results

logger = logging.getLogger(__name__)

RegressionCase = Tuple[Sequence[str], str]

REGRESSION_CASES: List[RegressionCase] = [
    (
        ["1:[2,7,8]", "2:[1,3,6]", "3:[2,4,5]", "4:[3]", "5:[3]", "6:[2]",
         "7:[1]", "8:[1,9,12]", "9:[8,10,11]", "10:[9]", "11:[9]", "12:[8]", "13:[]"],
        "1:50,2:58,3:66,4:74,5:73,6:72,7:71,8:30,9:48,10:68,11:67,12:66,13:0",
    ),
    (
        ["1:[5]", "4:[5]", "3:[5]", "5:[1,4,3,2]",
         "2:[5,15,7]", "7:[2,8]", "8:[7,38]", "15:[2]", "38:[8]"],
        "1:82,2:53,3:80,4:79,5:70,7:46,8:38,15:68,38:45",
    ),
    (
        ["1:[5]", "2:[5]", "3:[5]", "4:[5]", "5:[1,2,3,4]"],
        "1:14,2:13,3:12,4:11,5:4",
    ),
    (
        ["1:[5]", "2:[5,18]", "3:[5,12]", "4:[5]", "5:[1,2,3,4]", "18:[2]", "12:[3]"],
        "1:44,2:25,3:30,4:41,5:20,12:33,18:27",
    ),
]


@dataclass
class RegressionOutcome:
    """Result of one regression case."""

    index: int
    passed: bool
    expected: str
    actual: str


def run_regression(cases: Sequence[RegressionCase] = REGRESSION_CASES,
                   batch: Optional[TrafficBatch] = None) -> List[RegressionOutcome]:
    """
    Run every case on a single batch, resetting it between cases.

    Args:
        cases: (description lines, expected serialized output) pairs
        batch: Batch to reuse (a fresh one is created if omitted)

    Returns:
        One outcome per case, in case order
    """
    batch = batch or TrafficBatch()
    outcomes = []

    for index, (lines, expected) in enumerate(cases, start=1):
        batch.reset_all()
        try:
            batch.load(parse_descriptions(lines))
            actual = serialize_results(batch.run())
        finally:
            batch.reset_all()

        passed = actual == expected
        if passed:
            logger.info(f"test case #{index} ---> CORRECT")
        else:
            logger.error(f"test case #{index} ---> WRONG (got {actual} but expected {expected})")
        outcomes.append(RegressionOutcome(index, passed, expected, actual))

    return outcomes
