"""Command-line interface for salestax.

Usage:
    salestax <basket_file>
    salestax - < basket_file
    salestax --verbose <basket_file>
"""
