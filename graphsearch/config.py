"""Configuration for graphsearch components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Tunables shared by the search algorithms and result rendering."""

    # Number of leading and trailing vertices shown by str(PathResult)
    path_display_cut: int = 10

    # First line of format_adjacency() output
    adjacency_header: str = "Graph adjacency list:"

    # Dijkstra stops as soon as the target is settled
    dijkstra_stop_at_target: bool = True

    # Edge weight used by concrete graphs when an edge carries no weight attribute
    default_weight: float = 1.0

    def validate(self) -> None:
        """Raise ValueError if any value is out of range."""
        if self.path_display_cut < 0:
            raise ValueError(
                f"path_display_cut must be non-negative, got {self.path_display_cut}"
            )
        if self.default_weight < 0:
            raise ValueError(
                f"default_weight must be non-negative, got {self.default_weight}"
            )


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
