"""Bulma CSS components built as HTML element trees: elements, components and form controls."""

__version__ = "0.1.0"