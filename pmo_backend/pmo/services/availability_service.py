FULL_CAPACITY = 100


def allocated_percent(developer_id, assignments, as_of):
    return sum(
        assignment.time_allocation
        for assignment in assignments
        if assignment.developer_id == developer_id and assignment.is_active(as_of)
    )


def availability(developers, assignments, as_of):
    """
    Remaining capacity of each developer at ``as_of``.

    Remaining is 100 minus the allocations of the developer's active
    assignments. Developers with nothing left (including over-allocated ones)
    are left out; the others keep their input order.

    :return: list of ``(developer, remaining_percent)`` pairs.
    """
    available = []
    for developer in developers:
        remaining = FULL_CAPACITY - allocated_percent(developer.id, assignments, as_of)
        if remaining > 0:
            available.append((developer, remaining))
    return available
