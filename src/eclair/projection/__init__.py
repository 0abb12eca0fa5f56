"""
Graph projection engine.

Pure functions that turn a full architecture graph into the reduced,
traceable, positioned view:
- visibility: hide categories, rewiring edges across hidden nodes
- flow: upstream/downstream tracing
- orphans: nodes touched by no edge
- viewport: fit-to-screen transforms
- domain_map: cross-domain connections
- compare: changes between two graph versions
"""

from .compare import compare_graphs, compute_domain_connection_diff
from .depth import calculate_node_depths
from .domain_map import connected_domains, extract_domain_map
from .flow import trace_flow
from .orphans import detect_orphans, strip_orphans
from .pipeline import default_visible_types, project_view, restrict_to
from .search import filter_nodes_by_search
from .viewport import fit_all, fit_domain
from .visibility import reduce_graph

__all__ = [
    "reduce_graph",
    "trace_flow",
    "detect_orphans", "strip_orphans",
    "fit_all", "fit_domain",
    "filter_nodes_by_search",
    "calculate_node_depths",
    "project_view", "restrict_to", "default_visible_types",
    "extract_domain_map", "connected_domains",
    "compare_graphs", "compute_domain_connection_diff",
]
