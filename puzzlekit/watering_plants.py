"""Count the steps needed to water a row of plants from one water source."""


def watering_steps(plants, capacity):
    """Return the steps taken to water ``plants`` with a can of ``capacity``.

    Plant ``i`` stands at ``x = i`` and the source at ``x = -1``. The can is
    refilled only when it cannot water the next plant.
    """
    steps = 0
    remaining = capacity
    for position, need in enumerate(plants):
        if need > capacity:
            raise ValueError(f"plant {position} needs more water than the can holds")
        if need <= remaining:
            steps += 1
            remaining -= need
        else:
            steps += 2 * position + 1
            remaining = capacity - need
    return steps