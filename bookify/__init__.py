"""
Bookify: доменная модель приложения краткосрочной аренды жилья.
"""

__version__ = "0.1.0"
