"""Aldrin DTWAP account layouts."""

from .layout import (
    DTWAP_AVAILABLE_TOKENS,
    DTWAP_FEES,
    DTWAP_ORDER,
    DTWAP_ORDER_ARRAY,
    DTWAP_PAIR_SETTINGS,
    GET_AVAILABLE_TOKENS_INSTRUCTION,
    DtwapAvailableTokens,
    DtwapFees,
    DtwapOrder,
    DtwapOrderArray,
    DtwapPairSettings,
    GetAvailableTokensInstruction,
)

__all__ = [
    "DTWAP_ORDER",
    "DTWAP_ORDER_ARRAY",
    "DTWAP_FEES",
    "DTWAP_PAIR_SETTINGS",
    "DTWAP_AVAILABLE_TOKENS",
    "GET_AVAILABLE_TOKENS_INSTRUCTION",
    "DtwapOrder",
    "DtwapOrderArray",
    "DtwapFees",
    "DtwapPairSettings",
    "DtwapAvailableTokens",
    "GetAvailableTokensInstruction",
]
