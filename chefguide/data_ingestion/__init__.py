"""
Dataset ingestion package for the chef directory.

Responsibilities:
- Check the bundled season dataset for integrity problems before it ships.
- Export the flat restaurant table as CSV for offline use.
"""
