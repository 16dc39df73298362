import logging

import bipartite_matching._models as models
import bipartite_matching._util as util
from bipartite_matching._graph import new_bipartite_graph

logger = logging.getLogger(__name__)


def _is_subset(left_tags, right_tags):
    return left_tags <= right_tags


def _intersects(left_tags, right_tags):
    return not left_tags.isdisjoint(right_tags)


def _is_equal(left_tags, right_tags):
    return left_tags == right_tags


ADJACENCY_RULES = {
    "subset": _is_subset,
    "intersect": _intersects,
    "equal": _is_equal,
}


def load_problem(path, config=None):
    return Problem.from_toml(path.read_text(), config)


class Problem:
    """Items on two sides, which are paired by comparing their tags."""

    def __init__(self, desc):
        self.desc = desc
        self._rule = ADJACENCY_RULES[desc.rule]

    @classmethod
    def from_toml(cls, content, config=None):
        data = util.toml_loads(content)
        if config is not None:
            data.setdefault("rule", config.rule)
            data.setdefault("strict", config.strict)
        return cls(models.ProblemDesc.init_recursive(**data))

    def adjacent(self, left_item, right_item):
        return self._rule(set(left_item.tags), set(right_item.tags))

    def graph(self, strict=None):
        if strict is None:
            strict = self.desc.strict
        return new_bipartite_graph(
            self.desc.left, self.desc.right, self.adjacent, strict=strict
        )

    def solve(self, strict=None):
        """Return the names of the matched items as (left, right) tuples."""
        graph = self.graph(strict)
        pairs = [(left.name, right.name) for left, right in graph.matched_pairs()]
        logger.info(
            'Matched %d of %d left items using rule "%s"',
            len(pairs),
            len(self.desc.left),
            self.desc.rule,
        )
        return pairs
