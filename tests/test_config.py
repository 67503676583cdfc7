"""Test the configuration module functionality."""

import pytest

from graphsearch.config import SEARCH_CONFIG, SearchConfig


def test_search_config_defaults():
    """Test that the default configuration values are correct."""
    config = SearchConfig()

    assert config.path_display_cut == 10
    assert config.adjacency_header == "Graph adjacency list:"
    assert config.dijkstra_stop_at_target is True
    assert config.default_weight == 1.0


def test_search_config_validate_accepts_defaults():
    SearchConfig().validate()
    SearchConfig(path_display_cut=0, default_weight=0).validate()


def test_search_config_validate_rejects_negative_values():
    with pytest.raises(ValueError, match="path_display_cut"):
        SearchConfig(path_display_cut=-1).validate()
    with pytest.raises(ValueError, match="default_weight"):
        SearchConfig(default_weight=-0.5).validate()


def test_global_config_instance():
    """Test that the global configuration instance is properly initialized."""
    assert isinstance(SEARCH_CONFIG, SearchConfig)
    assert SEARCH_CONFIG.path_display_cut == 10
