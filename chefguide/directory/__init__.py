"""
Chef directory core.

Responsibilities:
- Parse the bundled season dataset into typed roster records.
- Normalize white and black spoon rosters into one uniform chef list.
- Filter the chef list by free text, season and spoon category.
- Hold the per-session filter state for browsing clients.
"""
