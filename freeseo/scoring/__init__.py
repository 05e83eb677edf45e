"""
Metric scoring for raw page audits.

Modules
-------
engine : one ``score_*`` function per metric plus ``compute_scores()``
         — pure functions, no I/O.
"""
