"""Grid state-space search: move templates, successor generation, BFS/DFS/IDS/bidirectional."""

__version__ = "0.1.0"
