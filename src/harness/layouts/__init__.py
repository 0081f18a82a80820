from src.harness.layouts.base import LayoutGenerator, LayoutRegistry
from src.harness.layouts.extreme import AllOffLayout, AllOnLayout, AlternatingLayout
from src.harness.layouts.random_coin import RandomCoinLayout

# Register all layouts
LayoutRegistry.register("random_coin", RandomCoinLayout)
LayoutRegistry.register("all_on", AllOnLayout)
LayoutRegistry.register("all_off", AllOffLayout)
LayoutRegistry.register("alternating", AlternatingLayout)

__all__ = [
    "LayoutGenerator",
    "LayoutRegistry",
    "RandomCoinLayout",
    "AllOnLayout",
    "AllOffLayout",
    "AlternatingLayout",
]
