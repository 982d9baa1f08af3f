"""
Summary counts over the normalized chef list: chefs, restaurants and
Michelin-recognised chefs, overall and broken down by season and spoon.
"""
