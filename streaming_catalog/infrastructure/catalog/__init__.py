"""Category infrastructure: snapshots, mapping and storage."""
