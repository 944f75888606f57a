"""Rounding engine registry.

An engine is any object (usually a module) providing the operations
named in :data:`ENGINE_OPERATIONS`.  The native engine is always
registered; others can be added with :func:`register_engine`.  Callers
choose an engine by passing a name or an engine object, otherwise the
``ROUNDPATH_ENGINE`` environment variable is consulted, falling back to
``'native'``.
"""

import logging
import os

from roundpath.errors import EngineNotFoundError

from . import native as native

logger = logging.getLogger(__name__)

ENGINE_ENV_VAR = 'ROUNDPATH_ENGINE'
DEFAULT_ENGINE = 'native'

ENGINE_OPERATIONS = ('fillet', 'extrude_filleted', 'chain_offset',
                     'shell_offset', 'extrude_with_end_radii')

ENGINE_REGISTRY = {'native': native}


def register_engine(name: str, engine) -> None:
    missing = [op for op in ENGINE_OPERATIONS if not callable(getattr(engine, op, None))]
    if missing:
        raise ValueError(f'engine {name!r} is missing operations: {missing}')
    ENGINE_REGISTRY[name] = engine


def get_engine(engine=None):
    """Resolve ``engine`` (a registered name, an engine object or ``None``)."""

    if engine is not None and not isinstance(engine, str):
        return engine
    name = engine or os.environ.get(ENGINE_ENV_VAR, DEFAULT_ENGINE)
    try:
        selected = ENGINE_REGISTRY[name]
    except KeyError:
        raise EngineNotFoundError(
            f'unknown rounding engine {name!r}; registered: {sorted(ENGINE_REGISTRY)}'
        ) from None
    logger.debug('using rounding engine %r', name)
    return selected


__all__ = ['native', 'ENGINE_OPERATIONS', 'ENGINE_REGISTRY', 'register_engine', 'get_engine']
