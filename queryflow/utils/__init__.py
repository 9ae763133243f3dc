from .ids import new_edge_id, new_node_id, solution_edge_id
from .logger import setup_logger

__all__ = ["new_edge_id", "new_node_id", "solution_edge_id", "setup_logger"]
