from __future__ import annotations
import logging
from itertools import count
from typing import Optional

from zeus import LispValue
from zeus import config
from zeus.types.symbol import Symbol, UninternedSymbol

logger = logging.getLogger(__name__)


class Runtime:
    """
    Mutable state owned by one interpreter instance and shared, by reference,
    by every frame of its environment chain.

    Features:
    - Symbol property lists (put/get/symbol-plist), insertion ordered
    - Gensym counter, monotonically increasing for the life of the instance
    - Evaluation depth counter with an optional upper bound
    """

    __slots__ = ("properties", "_gensym_counter", "gensym_prefix", "depth", "max_depth")

    def __init__(self, max_depth: Optional[int] = None, gensym_prefix: Optional[str] = None):
        self.properties: dict[Symbol, dict[LispValue, LispValue]] = {}
        self._gensym_counter = count(1)
        self.gensym_prefix: str = gensym_prefix or config.get_gensym_prefix()
        self.depth: int = 0
        self.max_depth: Optional[int] = max_depth if max_depth is not None else config.get_max_depth()

    def gen_sym(self, prefix: Optional[str] = None) -> UninternedSymbol:
        serial = next(self._gensym_counter)
        name = f"{prefix if prefix is not None else self.gensym_prefix}{serial}"
        logger.debug("gensym minted %s", name)
        return UninternedSymbol(name, serial)

    def put(self, symbol: Symbol, key: LispValue, value: LispValue) -> LispValue:
        self.properties.setdefault(symbol, {})[key] = value
        return value

    def get(self, symbol: Symbol, key: LispValue) -> LispValue:
        plist = self.properties.get(symbol)
        if plist is None or key not in plist:
            return []
        return plist[key]

    def plist(self, symbol: Symbol) -> list[list[LispValue]]:
        return [[k, v] for k, v in self.properties.get(symbol, {}).items()]
