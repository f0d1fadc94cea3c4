"""Input parsing, result rendering and regression cases."""

from .descriptions import (
    CityDescription,
    MalformedDescriptionError,
    parse_description,
    parse_descriptions,
    load_description_file,
    build_graph
)
from .results import serialize_results, results_to_dict
from .regression import REGRESSION_CASES, RegressionOutcome, run_regression

__all__ = [
    'CityDescription',
    'MalformedDescriptionError',
    'parse_description',
    'parse_descriptions',
    'load_description_file',
    'build_graph',
    'serialize_results',
    'results_to_dict',
    'REGRESSION_CASES',
    'RegressionOutcome',
    'run_regression'
]
