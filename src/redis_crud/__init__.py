"""
Redis CRUD - record tables on top of Redis

Stores integer-keyed entity records as Redis hashes, with an atomic per-table
sequence for primary keys and a sorted-set index for counting, existence
checks and batched, pipelined full scans.
"""

__version__ = "0.1.0"
