"""
citytraffic - maximum traffic per city of a tree-shaped road network.
Command-line entry point: parse descriptions, run the batch, print results.
"""

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from city_io import (
    MalformedDescriptionError,
    build_graph,
    load_description_file,
    parse_descriptions,
    results_to_dict,
    run_regression,
    serialize_results
)
from config.settings import get_settings
from graph_manager import (
    CityGraphError,
    export_graph_snapshot,
    export_graph_to_graphml,
    export_graph_to_json
)
from traffic_engine import TrafficBatch
from utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Compute the maximum traffic reachable from every city of a tree network'
    )
    parser.add_argument(
        'descriptions',
        nargs='*',
        help="City descriptions such as '1:[5]' '5:[1,2]' '2:[5]'"
    )
    parser.add_argument(
        '--input', '-i',
        type=str,
        help='File with one city description per line'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as a JSON object instead of city:traffic pairs'
    )
    parser.add_argument(
        '--export-json',
        type=str,
        help='Write the city graph and its results to a JSON file'
    )
    parser.add_argument(
        '--export-graphml',
        type=str,
        help='Write the city graph and its results to a GraphML file'
    )
    parser.add_argument(
        '--snapshot',
        type=str,
        help='Export JSON and GraphML snapshots with this name into the output directory'
    )
    parser.add_argument(
        '--self-check',
        action='store_true',
        help='Run the built-in regression cases and exit'
    )
    parser.add_argument(
        '--strict-tree',
        action='store_true',
        help='Fail instead of warning when the network contains a cycle'
    )
    parser.add_argument(
        '--reserve-zero-id',
        action='store_true',
        help='Reject city 0 as legacy inputs do'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: from settings, INFO)'
    )
    parser.add_argument(
        '--log-dir',
        type=str,
        default=None,
        help='Directory for rotating log files (default: console only)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the citytraffic command line."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level, args.log_dir or settings.log_dir)

    config = settings.engine_config()
    if args.strict_tree:
        config = replace(config, strict_tree=True)
    if args.reserve_zero_id:
        config = replace(config, reserve_zero_id=True)

    if args.self_check:
        outcomes = run_regression(batch=TrafficBatch(config=config))
        failed = [outcome.index for outcome in outcomes if not outcome.passed]
        print(f"{len(outcomes) - len(failed)}/{len(outcomes)} regression cases passed")
        return 1 if failed else 0

    try:
        descriptions = parse_descriptions(args.descriptions)
        if args.input:
            descriptions.extend(load_description_file(args.input))
        if not descriptions:
            logger.error("No city descriptions given (use positional arguments or --input)")
            return 2

        graph = build_graph(descriptions, config)
        batch = TrafficBatch(graph=graph, config=config)
        results = batch.run()
    except (MalformedDescriptionError, CityGraphError, OSError) as e:
        logger.error(f"Traffic computation failed: {e}")
        return 1

    if args.json:
        print(json.dumps(results_to_dict(results)))
    else:
        print(serialize_results(results))

    traffic = {entry.city: entry.traffic for entry in results}
    if args.export_json:
        Path(args.export_json).parent.mkdir(parents=True, exist_ok=True)
        export_graph_to_json(graph, args.export_json, traffic)
    if args.export_graphml:
        Path(args.export_graphml).parent.mkdir(parents=True, exist_ok=True)
        export_graph_to_graphml(graph, args.export_graphml, traffic)
    if args.snapshot:
        export_graph_snapshot(graph, settings.output_dir, args.snapshot, traffic)

    return 0


if __name__ == "__main__":
    sys.exit(main())
