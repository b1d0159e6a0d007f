"""Website generation for the league record book."""

from .generator import generate_website_from_data

__all__ = ['generate_website_from_data']
