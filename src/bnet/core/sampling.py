# src/bnet/core/sampling.py
"""
Approximate inference by sampling.

Both estimators share sample_value, which samples a node after
recursively sampling its parents, memoized per event:

  rejection_sampling:    prior samples, drop the ones that
                         disagree with the evidence
  likelihood_weighting:  evidence pinned, each draw weighted by
                         P(evidence | sampled parents)

The network must be acyclic. Recursion depth is bounded by the
longest ancestor chain.
"""

import logging
import random
from dataclasses import dataclass

from bnet.core.errors import NoConsistentSamples, ZeroTotalWeight
from bnet.core.network import Network, Node
from bnet.core.trace import ConvergenceTrace

log = logging.getLogger(__name__)

Event = dict[Node, bool]


def sample_value(node: Node, event: Event, rng: random.Random) -> bool:
    if node in event:
        return event[node]

    for parent in node.parents:
        sample_value(parent, event, rng)

    value = rng.random() < node.prob_true(event)
    event[node] = value
    return value


def prior_sample(network: Network, rng: random.Random, event: Event | None = None) -> Event:
    """Sample every leaf, which reaches every ancestor."""
    event = {} if event is None else event
    for node in network.leaf_nodes:
        sample_value(node, event, rng)
    return event


def is_consistent(evidence: list[Node], event: Event) -> bool:
    return all(event[node] == node.evidence_value for node in evidence)


def evidence_weight(evidence: list[Node], event: Event, rng: random.Random) -> float:
    """
    Product of P(node = declared value | parents) over evidence nodes.

    Parents not yet in the event (evidence that is not an ancestor
    of the query) are sampled first.
    """
    weight = 1.0
    for node in evidence:
        for parent in node.parents:
            sample_value(parent, event, rng)
        p = node.prob_true(event)
        weight *= p if node.evidence_value else 1.0 - p
    return weight


# === Tallies ===

@dataclass
class RejectionTally:
    samples: int = 0
    consistent: int = 0
    true_count: int = 0

    def add(self, consistent: bool, query_value: bool) -> None:
        self.samples += 1
        if consistent:
            self.consistent += 1
            if query_value:
                self.true_count += 1

    def merge(self, other: "RejectionTally") -> "RejectionTally":
        return RejectionTally(
            samples=self.samples + other.samples,
            consistent=self.consistent + other.consistent,
            true_count=self.true_count + other.true_count,
        )

    def current(self) -> float | None:
        if self.consistent == 0:
            return None
        return self.true_count / self.consistent

    def estimate(self) -> float:
        if self.consistent == 0:
            raise NoConsistentSamples(self.samples)
        return self.true_count / self.consistent


@dataclass
class WeightTally:
    samples: int = 0
    total_weight: float = 0.0
    true_weight: float = 0.0

    def add(self, weight: float, query_value: bool) -> None:
        self.samples += 1
        self.total_weight += weight
        if query_value:
            self.true_weight += weight

    def merge(self, other: "WeightTally") -> "WeightTally":
        return WeightTally(
            samples=self.samples + other.samples,
            total_weight=self.total_weight + other.total_weight,
            true_weight=self.true_weight + other.true_weight,
        )

    def current(self) -> float | None:
        if self.total_weight == 0:
            return None
        return self.true_weight / self.total_weight

    def estimate(self) -> float:
        if self.total_weight == 0:
            raise ZeroTotalWeight(self.samples)
        return self.true_weight / self.total_weight


# === Estimators ===

def check_samples(n: int) -> None:
    if n < 1:
        raise ValueError(f"Sample count must be at least 1, got {n}")


def rejection_tally(
    network: Network,
    n: int,
    rng: random.Random | None = None,
    trace: ConvergenceTrace | None = None,
) -> RejectionTally:
    check_samples(n)
    query = network.query_node()
    evidence = network.evidence_nodes()
    rng = rng or random.Random()

    log.info("Rejection sampling P(%s | %d evidence) with %d samples", query.name, len(evidence), n)

    tally = RejectionTally()
    for i in range(1, n + 1):
        event = prior_sample(network, rng)
        tally.add(is_consistent(evidence, event), event[query])
        if trace and trace.should_record(i, n):
            trace.record("rejection", i, tally.current())

    log.info("Rejection sampling kept %d of %d samples", tally.consistent, tally.samples)
    return tally


def rejection_sampling(
    network: Network,
    n: int,
    rng: random.Random | None = None,
    trace: ConvergenceTrace | None = None,
) -> float:
    tally = rejection_tally(network, n, rng, trace)
    if tally.consistent == 0:
        log.warning("No consistent samples out of %d, evidence may be rare", n)
    return tally.estimate()


def likelihood_tally(
    network: Network,
    n: int,
    rng: random.Random | None = None,
    trace: ConvergenceTrace | None = None,
) -> WeightTally:
    check_samples(n)
    query = network.query_node()
    evidence = network.evidence_nodes()
    rng = rng or random.Random()

    log.info("Likelihood weighting P(%s | %d evidence) with %d samples", query.name, len(evidence), n)

    base_event = {node: node.evidence_value for node in evidence}

    tally = WeightTally()
    for i in range(1, n + 1):
        event = dict(base_event)
        sample_value(query, event, rng)
        tally.add(evidence_weight(evidence, event, rng), event[query])
        if trace and trace.should_record(i, n):
            trace.record("likelihood", i, tally.current())

    log.info("Likelihood weighting total weight %.4f over %d samples", tally.total_weight, tally.samples)
    return tally


def likelihood_weighting(
    network: Network,
    n: int,
    rng: random.Random | None = None,
    trace: ConvergenceTrace | None = None,
) -> float:
    tally = likelihood_tally(network, n, rng, trace)
    if tally.total_weight == 0:
        log.warning("Total weight is zero over %d samples", n)
    return tally.estimate()


ESTIMATORS = {
    "rejection": rejection_sampling,
    "likelihood": likelihood_weighting,
}

METHOD_TITLES = {
    "rejection": "Rejection Sampling",
    "likelihood": "Likelihood-Weighted Sampling",
}
