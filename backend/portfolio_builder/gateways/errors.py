class PersistenceError(Exception):
    """The backing store rejected or failed a write."""


def raise_for_result(result):
    if not result.ok:
        raise PersistenceError(result.error or "Failed to save portfolio")
