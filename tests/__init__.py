"""Test suite for clipgraph.

Test Structure:
- unit/animation/: name decomposition, lookups, sequencing rules, graph passes
- unit/config/: config models and loaders
- unit/io/: folder enumeration and JSON export
- unit/cli/: command-line entry point
- conftest.py: Shared fixtures
"""
