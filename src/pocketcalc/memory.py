"""The single memory register."""

from enum import Enum


class MemoryOp(str, Enum):
    """Memory keys."""

    CLEAR = "MC"
    RECALL = "MR"
    ADD = "M+"
    SUBTRACT = "M-"


def update_memory(memory: float, value: float, op: MemoryOp | str) -> float:
    """
    Compute the register contents after a memory key press.

    Args:
        memory: Current register value
        value: The displayed value
        op: The memory key

    Returns:
        The new register value (unchanged for MR)
    """
    op = MemoryOp(op)
    if op is MemoryOp.CLEAR:
        return 0.0
    if op is MemoryOp.ADD:
        return memory + value
    if op is MemoryOp.SUBTRACT:
        return memory - value
    return memory
