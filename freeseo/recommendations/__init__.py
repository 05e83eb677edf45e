"""
Remediation recommendations derived from raw audit facts.

Modules
-------
rules : ``RecommendationRule`` + ``RULES`` + ``build_recommendations()``
        — pure functions, no I/O.
"""
