"""
League Record Book

Parse league career stats and all-time records CSV files and generate an
interactive website with a sortable career table and record cards.
"""

__version__ = "1.0.0"
