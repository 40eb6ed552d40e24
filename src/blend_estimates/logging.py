import logging

"""
Create the package logger. Estimation builders report skipped entities at DEBUG. The level is
applied from `settings.log_level` when the package is imported.
"""

logger = logging.getLogger("blend_estimates")
logger.propagate = False
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
logger.addHandler(_handler)
