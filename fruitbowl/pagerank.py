"""PageRank over a small graph of linked sites."""

from __future__ import annotations

import argparse
import textwrap
from collections.abc import Sequence
from dataclasses import dataclass

GRAPH: tuple[tuple[int, ...], ...] = (
    (1, 2),  # ESPN links to NFL, NBA
    (0,),  # NFL links to ESPN
    (0, 3),  # NBA links to ESPN, UFC
    (0,),  # UFC links to ESPN
    (0, 1),  # MLB links to ESPN, NFL
)

NAMES = ("ESPN", "NFL", "NBA", "UFC", "MLB")

EXPLANATION = (
    "PageRank is a link analysis algorithm used by Google that uses the hyperlink "
    "structure of the web to determine a quality ranking for each web page. It works "
    "by counting the number and quality of links to a page to determine a rough "
    "estimate of how important the website is."
)


@dataclass(frozen=True)
class PageRank:
    """The damping factor and number of iterations of the PageRank computation."""

    damping: float = 0.85
    iterations: int = 100

    def rank(self, graph: Sequence[Sequence[int]]) -> list[float]:
        """Return the rank of each node; ``graph[i]`` lists the nodes ``i`` links to."""
        n = len(graph)
        if n == 0:
            return []
        for node, edges in enumerate(graph):
            for edge in edges:
                if not 0 <= edge < n:
                    raise IndexError(f"node {node} links to missing node {edge}")

        ranks = [1.0 / n] * n
        teleport = (1.0 - self.damping) / n
        for _ in range(self.iterations):
            new_ranks = [0.0] * n
            for node, edges in enumerate(graph):
                if not edges:
                    continue
                contribution = ranks[node] / len(edges)
                for edge in edges:
                    new_ranks[edge] += contribution
            ranks = [rank * self.damping + teleport for rank in new_ranks]
        return ranks


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Rank a small graph of sports sites with PageRank."
    ).parse_args(argv)
    ranks = PageRank(0.85, 100).rank(GRAPH)
    for name, rank in zip(NAMES, ranks):
        print(f"The PageRank of {name} is {rank}")
    print(textwrap.fill(EXPLANATION, 78))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())