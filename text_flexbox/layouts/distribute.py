"""Main-axis space distribution (justify-content)."""

from typing import List, Sequence

from text_flexbox.core.layout_spec import GapPlan, Justify, clamp_size


def natural_size(item_sizes: Sequence[int], gap: int) -> int:
    """Main-axis size of items laid out with only the explicit gap."""
    if not item_sizes:
        return 0
    return sum(item_sizes) + max(gap, 0) * (len(item_sizes) - 1)


def distribute(
    item_sizes: Sequence[int],
    container_size: int,
    justify: Justify = Justify.START,
    gap: int = 0,
) -> GapPlan:
    """Compute gaps and edge padding for items along the main axis.

    Parameters
    ----------
    item_sizes : Sequence[int]
        Main-axis size of each item, in order.
    container_size : int
        Container main-axis size. 0 (auto) leaves no space to distribute.
    justify : Justify
        How leftover space is shared between the edges and the gaps.
    gap : int
        Explicit spacing placed between every pair of items.

    Returns
    -------
    GapPlan
        One gap per adjacent pair plus leading/trailing padding. Leftover
        space is clamped at 0, so items are never shrunk.
    """
    n = len(item_sizes)
    if n == 0:
        return GapPlan()

    gap = clamp_size("gap", gap)
    justify = Justify.coerce(justify)
    leftover = max(0, clamp_size("container_size", container_size) - natural_size(item_sizes, gap))
    gaps = [gap] * (n - 1)

    if justify is Justify.END:
        return GapPlan(tuple(gaps), leftover, 0)
    if justify is Justify.CENTER:
        half = leftover // 2
        return GapPlan(tuple(gaps), half, leftover - half)
    if justify is Justify.SPACE_BETWEEN:
        return _space_between(n, leftover, gaps)
    if justify is Justify.SPACE_AROUND:
        return _space_around(n, leftover, gaps)
    if justify is Justify.SPACE_EVENLY:
        return _space_evenly(n, leftover, gaps)
    return GapPlan(tuple(gaps), 0, leftover)


def _space_between(n: int, leftover: int, gaps: List[int]) -> GapPlan:
    if n <= 1:
        return GapPlan(tuple(gaps), 0, leftover)
    extra, remainder = divmod(leftover, n - 1)
    for i in range(len(gaps)):
        gaps[i] += extra + (1 if i < remainder else 0)
    return GapPlan(tuple(gaps), 0, 0)


def _space_around(n: int, leftover: int, gaps: List[int]) -> GapPlan:
    # leftover % (2n) and the inner division remainder are dropped
    unit = leftover // (2 * n)
    if n > 1:
        extra = (leftover - 2 * unit) // (n - 1)
        gaps = [g + extra for g in gaps]
    return GapPlan(tuple(gaps), unit, unit)


def _space_evenly(n: int, leftover: int, gaps: List[int]) -> GapPlan:
    slot, remainder = divmod(leftover, n + 1)

    def take() -> int:
        nonlocal remainder
        if remainder > 0:
            remainder -= 1
            return slot + 1
        return slot

    leading = take()
    trailing = take()
    return GapPlan(tuple(g + take() for g in gaps), leading, trailing)
