"""Classic algorithms: searching, bit tricks, subsets, number theory, graphs, contest problems and dynamic programming."""

__version__ = "0.1.0"