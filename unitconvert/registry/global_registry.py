"""
Process-wide default registry, built on first access.
"""

from pathlib import Path
import logging
import os
import threading

from .unit_registry import UnitRegistry


logger = logging.getLogger(__name__)

DEFAULT_DEFINITIONS_FILE = Path(__file__).resolve().parent.parent / 'data' / 'unit_definitions.txt'

# Environment variable naming a definitions file to load instead of the bundled one
DEFINITIONS_ENV_VAR = 'UNITCONVERT_DEFINITIONS'

DEFAULT_CONFIG = {
    'si_prefixes': True,
    'definitions_file': DEFAULT_DEFINITIONS_FILE,
}

_global_registry = None
_init_lock = threading.Lock()


def _build_global_registry() -> UnitRegistry:
    config = DEFAULT_CONFIG.copy()
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        config['definitions_file'] = Path(override)

    logger.info("Initialising global unit registry from %s", config['definitions_file'])
    registry = UnitRegistry(
        definitions_file=config['definitions_file'],
        si_prefixes=config['si_prefixes'],
    )
    logger.info("Global unit registry ready with %d units", len(registry))
    return registry


def get_global_registry() -> UnitRegistry:
    """
    Return the shared registry, loading the default unit set on first use.

    Initialisation happens once even if several threads ask at the same
    time. Units added to the returned registry are visible to every caller;
    like any registry it has no locking around later definitions.
    """
    global _global_registry
    registry = _global_registry
    if registry is None:
        with _init_lock:
            if _global_registry is None:
                _global_registry = _build_global_registry()
            registry = _global_registry
    return registry
