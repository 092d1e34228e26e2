import logging
import threading

from hetgraphlets import GraphletConfig, count_graphlets, random_typed_graph

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# Sizes and workers can also come from HETGRAPHLETS_* environment variables.
config = GraphletConfig.from_env(max_graphlet_size=4, workers=4)

view = random_typed_graph(
    random_state=42,
    number_of_nodes=500,
    maximal_node_degree=4,
    number_of_node_types=3,
    number_of_edge_types=2,
)

cancel = threading.Event()
counts = count_graphlets(view, config, cancel=cancel)

print(counts.report(), end="")
print("by size:", counts.counts_by_size())

X = counts.node_feature_matrix(view.number_of_nodes)
print("feature matrix:", X.shape)
