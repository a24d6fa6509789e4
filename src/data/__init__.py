"""Module de chargement et de parsing des données de télémétrie.

Importer directement depuis src.data.loaders / src.data.parsers :
src.models dépend de src.data.parsers, un re-export ici créerait un cycle.
"""
