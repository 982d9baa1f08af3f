"""
Culinary Class War restaurant guide.

A small FastAPI service over the bundled season dataset: chefs from both
spoon categories normalized into one list, filtered by text, season and
category, and summarised into directory-wide counts.
"""
