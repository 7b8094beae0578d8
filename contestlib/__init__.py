"""Classic algorithmic routines: range queries, strings, subarrays, greedy and interval searches, and trees."""

__version__ = "0.1.0"