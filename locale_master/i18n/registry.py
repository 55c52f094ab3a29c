"""Optional default LocaleMaster registry and string helpers.

Meant for the application's outermost composition point only. Library code
should receive a Translator or LocaleMaster explicitly.

The helper functions (tr, plural, field, exists) never raise: before
initialization they return the key itself, or False for exists().
"""

import asyncio
from typing import Any, Mapping, Optional

from locale_master.core.logging import get_module_logger
from locale_master.i18n.errors import NotInitializedError
from locale_master.i18n.models import ParameterValue
from locale_master.i18n.service import LocaleMaster

logger = get_module_logger()

_DEFAULT: Optional[LocaleMaster] = None
_INIT_LOCK = asyncio.Lock()


async def initialize(**kwargs: Any) -> LocaleMaster:
    """Create the default LocaleMaster once.

    Later calls return the existing instance and ignore their arguments.
    Concurrent first calls build a single instance.

    Args:
        **kwargs: Forwarded to LocaleMaster.create().

    Returns:
        The default LocaleMaster.
    """
    global _DEFAULT
    async with _INIT_LOCK:
        if _DEFAULT is None:
            _DEFAULT = await LocaleMaster.create(**kwargs)
            logger.info("default_locale_master_registered")
    return _DEFAULT


def set_default(master: LocaleMaster) -> None:
    global _DEFAULT
    _DEFAULT = master


def get_default() -> LocaleMaster:
    """Get the default LocaleMaster.

    Raises:
        NotInitializedError: If initialize() or set_default() was never called.
    """
    if _DEFAULT is None:
        raise NotInitializedError(
            "LocaleMaster not initialized. Call initialize() first."
        )
    return _DEFAULT


def reset_default() -> None:
    """Forget the default instance (tests and shutdown)."""
    global _DEFAULT, _INIT_LOCK
    _DEFAULT = None
    _INIT_LOCK = asyncio.Lock()


def is_initialized() -> bool:
    return _DEFAULT is not None


def tr(
    key: str,
    parameters: Optional[Mapping[str, ParameterValue]] = None,
    namespace: Optional[str] = None,
) -> str:
    try:
        return get_default().tr(key, parameters, namespace=namespace)
    except NotInitializedError:
        return key


def plural(
    key: str,
    count: int,
    parameters: Optional[Mapping[str, ParameterValue]] = None,
    namespace: Optional[str] = None,
) -> str:
    try:
        return get_default().plural(key, count, parameters, namespace=namespace)
    except NotInitializedError:
        return key


def field(key: str, namespace: Optional[str] = None) -> str:
    try:
        return get_default().field(key, namespace=namespace)
    except NotInitializedError:
        return key


def exists(key: str, namespace: Optional[str] = None) -> bool:
    try:
        return get_default().exists(key, namespace=namespace)
    except NotInitializedError:
        return False
