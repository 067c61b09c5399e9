from portfolio_builder.extensions import db

def compact_order(items, order_field="order"):
    """
    Re-assigns sequential order values (0..N-1) to already-scoped rows,
    keeping their current relative order.
    """
    ordered = sorted(items, key=lambda item: getattr(item, order_field) or 0)

    for index, item in enumerate(ordered):
        setattr(item, order_field, index)

    db.session.flush()
    return ordered


def apply_order(items, ordered_ids, order_field="order"):
    """
    Moves the listed ids to the front in the given sequence, then
    compacts. Ids that do not belong to items are ignored.
    """
    by_id = {item.id: item for item in items}
    listed = [by_id[item_id] for item_id in ordered_ids if item_id in by_id]
    rest = sorted(
        (item for item in items if item not in listed),
        key=lambda item: getattr(item, order_field) or 0
    )

    for index, item in enumerate(listed + rest):
        setattr(item, order_field, index)

    db.session.flush()
    return listed + rest
