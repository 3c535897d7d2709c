"""
Network Metric Calculator

Computes graph-level statistics for a set of nodes and edges using NetworkX.

Metrics:
    density                 |E| / (n·(n−1)/2)
    clustering_coefficient  mean local clustering (triangle counting)
    average_path_length     mean hop distance over all connected pairs
    centralization          (max influence − mean influence) / max influence
    modularity              Louvain partition scored by Newman modularity
    influence_distribution  share of influence held by the top 20 % of members

Every ratio is guarded: empty and single-node graphs yield 0 for the
structural metrics and a neutral influence distribution instead of NaN.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Set, Tuple

import networkx as nx

from boardnet.domain.models.network import (
    InfluenceDistribution,
    NetworkEdge,
    NetworkMetrics,
    NetworkNode,
)

TOP_INFLUENCE_SHARE = 0.2


def build_graph(nodes: Sequence[NetworkNode], edges: Sequence[NetworkEdge]) -> nx.Graph:
    """Undirected NetworkX view of the network, weighted by edge strength."""
    G = nx.Graph()
    for node in nodes:
        G.add_node(
            node.id,
            influence=node.influence_score,
            role=node.metadata.role.value,
        )
    for edge in edges:
        G.add_edge(
            edge.source,
            edge.target,
            weight=edge.strength,
            type=edge.type.value,
        )
    return G


class MetricCalculator:
    """
    Graph-level statistics for a board network.

    Louvain community detection is seeded so repeated runs over the same
    network produce the same modularity.
    """

    def __init__(self, community_seed: int = 42) -> None:
        self.community_seed = community_seed
        self._logger = logging.getLogger(__name__)

    def calculate(
        self, nodes: Sequence[NetworkNode], edges: Sequence[NetworkEdge],
    ) -> NetworkMetrics:
        G = build_graph(nodes, edges)
        communities = self.communities(G)

        metrics = NetworkMetrics(
            density=self.density(len(nodes), len(edges)),
            clustering_coefficient=self.clustering_coefficient(G),
            average_path_length=self.average_path_length(G),
            centralization=self.centralization(nodes),
            modularity=self.modularity(G, communities),
            influence_distribution=self.influence_distribution(nodes),
            community_count=len(communities),
        )
        self._logger.debug("Network metrics: %s", metrics.to_dict())
        return metrics

    # ------------------------------------------------------------------
    # Structural metrics
    # ------------------------------------------------------------------

    @staticmethod
    def density(node_count: int, edge_count: int) -> float:
        if node_count < 2:
            return 0.0
        possible = node_count * (node_count - 1) / 2
        return edge_count / possible

    @staticmethod
    def clustering_coefficient(G: nx.Graph) -> float:
        if G.number_of_nodes() == 0:
            return 0.0
        return nx.average_clustering(G)

    @staticmethod
    def average_path_length(G: nx.Graph) -> float:
        """
        Mean shortest-path hop count over every connected pair.

        Disconnected pairs are skipped rather than counted as infinite, so a
        graph made of several components still gets a finite value.
        """
        total = 0.0
        pairs = 0
        for component in nx.connected_components(G):
            size = len(component)
            if size < 2:
                continue
            ordered_pairs = size * (size - 1)
            total += nx.average_shortest_path_length(G.subgraph(component)) * ordered_pairs
            pairs += ordered_pairs
        return total / pairs if pairs else 0.0

    def communities(self, G: nx.Graph) -> List[Set[str]]:
        if G.number_of_nodes() == 0:
            return []
        if G.number_of_edges() == 0:
            return [{n} for n in G.nodes]
        return [
            set(c) for c in nx.community.louvain_communities(
                G, weight="weight", seed=self.community_seed,
            )
        ]

    @staticmethod
    def modularity(G: nx.Graph, communities: List[Set[str]]) -> float:
        if G.number_of_edges() == 0 or not communities:
            return 0.0
        return nx.community.modularity(G, communities, weight="weight")

    # ------------------------------------------------------------------
    # Influence metrics
    # ------------------------------------------------------------------

    @staticmethod
    def centralization(nodes: Sequence[NetworkNode]) -> float:
        if not nodes:
            return 0.0
        influences = [n.influence_score for n in nodes]
        peak = max(influences)
        if peak <= 0:
            return 0.0
        mean = sum(influences) / len(influences)
        return (peak - mean) / peak

    @staticmethod
    def influence_distribution(nodes: Sequence[NetworkNode]) -> InfluenceDistribution:
        influences = sorted((n.influence_score for n in nodes), reverse=True)
        total = sum(influences)
        if total <= 0:
            return InfluenceDistribution()

        top = math.ceil(len(influences) * TOP_INFLUENCE_SHARE)
        concentrated = sum(influences[:top]) / total
        return InfluenceDistribution(
            concentrated=concentrated,
            distributed=1 - concentrated,
            balanced=1 - abs(0.5 - concentrated) * 2,
        )


def top_influence_members(nodes: Sequence[NetworkNode]) -> Tuple[str, ...]:
    """Ids of the top 20 % of members by influence (ceil rounding)."""
    ranked = sorted(nodes, key=lambda n: n.influence_score, reverse=True)
    top = math.ceil(len(ranked) * TOP_INFLUENCE_SHARE)
    return tuple(n.id for n in ranked[:top])

