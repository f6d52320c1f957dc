"""Schema loaders producing blokgen type graphs."""

from .graphql_sdl import load_type_graph, load_type_graph_file

__all__ = ["load_type_graph", "load_type_graph_file"]
