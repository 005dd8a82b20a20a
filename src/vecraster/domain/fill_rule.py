"""Fill rules mapping a winding number to coverage."""

from enum import Enum


class FillRule(str, Enum):
    """Convention deciding whether a winding number means "inside".

    - NONZERO: filled when the winding number is not zero
    - EVENODD: filled when the winding number is odd
    """

    NONZERO = "nonzero"
    EVENODD = "evenodd"

    def evaluate(self, winding: int) -> bool:
        """Decide coverage for a winding number.

        Args:
            winding: Signed crossing count at a sample point

        Returns:
            True if the sample point is filled
        """
        match self:
            case FillRule.NONZERO:
                return winding != 0
            case FillRule.EVENODD:
                # Python's modulo is non-negative here, so -1 and -3 are odd too
                return winding % 2 == 1
