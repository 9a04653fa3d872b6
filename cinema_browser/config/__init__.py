"""
Loading and modelling of Cinema database documents, plus application settings.
"""
