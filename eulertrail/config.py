"""Configuration for trail solvers and the component-list loader."""

from dataclasses import dataclass


@dataclass
class TrailConfig:
    """Defaults shared by the solvers, the loader and the CLI."""

    # Matcher used when a query does not inject one ("blossom" or "exhaustive")
    default_matcher: str = "blossom"

    # Largest exposed-node set the exhaustive matcher accepts (2**n states)
    exhaustive_max_nodes: int = 20

    # Node the CLI measures trails from
    default_source: int = 0

    # Problem 2 ranks trails by length first, then by strength
    problem2_offset: int = 10_000_000

    def edge_weight(self, problem: int, a: int, b: int) -> int:
        """Weight of a component ``a/b`` under the given problem rules."""
        if problem == 1:
            return a + b
        if problem == 2:
            return self.problem2_offset + a + b
        raise ValueError(f"Unknown problem {problem!r}; expected 1 or 2.")


# Global configuration instance
TRAIL_CONFIG = TrailConfig()
