"""
citytraffic Test Suite

Test Organization:
- test_city_graph.py: City graph model
- test_path_cache.py: Directed path cache
- test_rerooting.py: Rerooting traversal engine
- test_batch.py: Batch driver and reset
- test_descriptions.py: Description parsing and result rendering
- test_regression.py: Fixed regression cases
- test_graph_export.py: Tree checks and graph export
- test_config.py: Engine configuration and settings
- test_main.py: Command line

To run all tests:
    python -m pytest tests/
"""
