"""Filter state for the product grid."""

from dataclasses import dataclass

# Sentinel selector value meaning "no restriction on this axis"
ALL = "all"


@dataclass(frozen=True)
class FilterState:
    """The two filter selectors of the product grid.

    `group` filters on `Product.target_group`, `family` on
    `Product.scent_family`. Setting a selector returns a new state;
    the original is never mutated.
    """

    group: str = ALL
    family: str = ALL

    def with_group(self, value: str) -> "FilterState":
        """Return new state with the group selector set."""
        return FilterState(group=value, family=self.family)

    def with_family(self, value: str) -> "FilterState":
        """Return new state with the family selector set."""
        return FilterState(group=self.group, family=value)

    def reset(self) -> "FilterState":
        """Return the default state (both selectors `all`)."""
        return FilterState()

    @property
    def is_default(self) -> bool:
        return self.group == ALL and self.family == ALL
