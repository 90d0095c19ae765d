"""Classic algorithms and data structures: searching, sorting, heaps, bits, number theory,
dynamic programming, backtracking, greedy methods, stacks, graphs, spanning trees, shortest
paths, flows, disjoint sets, linked lists and trees."""

__version__ = "0.1.0"