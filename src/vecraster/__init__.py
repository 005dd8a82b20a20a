"""vecraster - Rasterize 2D vector paths into binary coverage grids.

vecraster turns polylines into pixel coverage masks with the crossing-number
(ray casting) algorithm, under the nonzero-winding or even-odd fill rule.
Strokes are rendered by expanding each segment into a rectangle and
filling the result.

Example:
    $ vecraster fill samples/figure_eight.json --width 20 --height 16 --rule evenodd

This prints the figure eight as ASCII art, leaving the doubly-wound
overlap empty.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
