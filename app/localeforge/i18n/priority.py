"""Module priority ordering for translation lookup.

Translations shipped by several modules may define the same entity. The
priority order decides which module wins: configuration lists modules from
lowest to highest priority, the "other_modules" placeholder stands for every
module not listed, and the project module is the highest priority unless it
is placed explicitly.
"""

from typing import Dict, List, Mapping, Sequence, TypeVar

from localeforge.logging import get_module_logger

logger = get_module_logger()

OTHER_MODULES = "other_modules"

T = TypeVar("T")


class SourcePrioritizer:
    """Orders modules from highest to lowest lookup priority."""

    def __init__(self, placeholder: str = OTHER_MODULES):
        """Initialize prioritizer.

        Args:
            placeholder: Priority entry replaced by all unlisted modules.
        """
        self.placeholder = placeholder

    def order_modules(
        self,
        all_modules: Sequence[str],
        configured_order: Sequence[str],
        current_module: str,
    ) -> List[str]:
        """Compute the lookup order of modules.

        Args:
            all_modules: Names of all known modules.
            configured_order: Partial priority order, lowest to highest.
                May contain the placeholder entry.
            current_module: The project module.

        Returns:
            Module names, highest priority first. The project module is
            included even when it is not a known module.

        Example:
            >>> SourcePrioritizer().order_modules(
            ...     ["a", "b", "c"], ["c", "other_modules"], "proj"
            ... )
            ['proj', 'b', 'a', 'c']
        """
        # The project module is placed explicitly below
        module_names = [name for name in all_modules if name != current_module]

        order = list(configured_order)
        unspecified = [name for name in module_names if name not in order]

        if self.placeholder in order:
            index = order.index(self.placeholder)
            order[index : index + 1] = unspecified
        else:
            order[0:0] = unspecified

        if current_module not in order:
            order.append(current_module)

        order.reverse()
        return order

    def sorted_modules(
        self,
        modules: Mapping[str, T],
        configured_order: Sequence[str],
        current_module: str,
    ) -> Dict[str, T]:
        """Order a module mapping by lookup priority.

        Entries of the priority order without a backing module (unknown
        names, a missing project module) are skipped.

        Args:
            modules: Mapping of module name to module data (e.g. a path).
            configured_order: Partial priority order, lowest to highest.
            current_module: The project module.

        Returns:
            Ordered dict of the known modules, highest priority first.
        """
        order = self.order_modules(list(modules), configured_order, current_module)
        sorted_modules = {name: modules[name] for name in order if name in modules}

        skipped = [name for name in order if name not in modules]
        if skipped:
            logger.debug("skipped_unknown_priority_modules", modules=skipped)

        return sorted_modules
