"""
Presentation Layer - Interface HTTP.

Cette couche expose les use cases billing via FastAPI et
traduit les exceptions du domaine en reponses HTTP.
"""
