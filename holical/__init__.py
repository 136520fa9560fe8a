"""Holiday definitions and date calculations for European countries, their regions and the ECB."""

__version__ = "2.0.0"
__all__ = ["holiday", "ch", "cz", "de", "dk", "ecb", "es", "fr", "gb", "gr", "ie", "it"]