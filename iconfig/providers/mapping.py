"""
Nested mapping provider and the flattening shared by structured sources.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from iconfig.core.path import ConfigurationPath, KeyNormalizer
from iconfig.core.provider import ConfigProvider
from iconfig.core.source import ConfigSource
from iconfig.reload.change_token import ChangeToken, NEVER_CHANGE_TOKEN


def flatten(node: Any,
            prefix: str = "",
            out: Optional[Dict[str, Optional[str]]] = None,
            stringify: Callable[[Any], str] = str,
            keep_empty: bool = False) -> Dict[str, Optional[str]]:
    """
    Flatten a nested structure into colon-separated keys.

    Mappings produce ``parent:child`` keys and lists or tuples produce
    ``parent:<index>`` keys with zero-based indices. Scalars are converted
    with ``stringify`` and ``None`` leaves are kept as explicit nulls.

    Parameters
    ----------
    node : Any
        Structure to flatten
    prefix : str
        Path of ``node`` itself
    out : Dict[str, Optional[str]], optional
        Target store, a new dict is created when omitted
    stringify : Callable[[Any], str]
        Conversion applied to non-null scalar leaves
    keep_empty : bool
        Store an empty mapping or list below the root as a null entry at its
        path instead of dropping it

    Returns
    -------
    Dict[str, Optional[str]]
        The flattened store with normalized keys
    """
    if out is None:
        out = {}

    if isinstance(node, Mapping):
        if not node and prefix and keep_empty:
            out[KeyNormalizer.normalize(prefix)] = None
        for key, value in node.items():
            flatten(value, ConfigurationPath.combine(prefix, str(key)), out, stringify, keep_empty)
    elif isinstance(node, (list, tuple)):
        if not node and prefix and keep_empty:
            out[KeyNormalizer.normalize(prefix)] = None
        for index, value in enumerate(node):
            flatten(value, ConfigurationPath.combine(prefix, str(index)), out, stringify, keep_empty)
    elif prefix:
        out[KeyNormalizer.normalize(prefix)] = None if node is None else stringify(node)

    return out


class MapConfigProvider(ConfigProvider):
    """
    Provider over a nested mapping.

    ``{'database': {'hosts': ['a', 'b']}}`` becomes ``database:hosts:0 = 'a'``
    and ``database:hosts:1 = 'b'``. Non-string scalars go through ``str``.
    """

    def __init__(self, mapping: Mapping[str, Any]):
        super().__init__()
        self._mapping = mapping

    def load(self) -> None:
        self._replace_data(flatten(self._mapping))

    def get_reload_token(self) -> ChangeToken:
        return NEVER_CHANGE_TOKEN


class MapConfigSource(ConfigSource):

    def __init__(self, mapping: Mapping[str, Any]):
        self.mapping = mapping

    def build(self) -> MapConfigProvider:
        return MapConfigProvider(self.mapping)
