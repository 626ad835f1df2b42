from pymongo import ASCENDING
from pymongo.errors import OperationFailure


def _normalize_key_pairs(keys):
    return [(k, v) for k, v in keys]


async def _create_index_safe(collection, keys, **kwargs):
    """
    Create index safely.
    If Mongo reports IndexOptionsConflict/IndexKeySpecsConflict for same key pattern,
    drop the conflicting index and recreate with desired options.
    """
    desired_key = _normalize_key_pairs(keys)
    desired_name = kwargs.get("name")
    try:
        await collection.create_index(keys, **kwargs)
        return
    except OperationFailure as e:
        if getattr(e, "code", None) not in {85, 86}:
            raise

        conflicting_names = []
        async for idx in collection.list_indexes():
            idx_key = _normalize_key_pairs(list(idx.get("key", {}).items()))
            if idx_key == desired_key:
                idx_name = idx.get("name")
                if idx_name and idx_name != desired_name:
                    conflicting_names.append(idx_name)

        for idx_name in conflicting_names:
            await collection.drop_index(idx_name)

        await collection.create_index(keys, **kwargs)


async def ensure_indexes(db):
    # Users: one record per email
    await _create_index_safe(
        db.users,
        [("email", ASCENDING)],
        name="users_email_unique_idx",
        unique=True,
    )
    await _create_index_safe(
        db.users,
        [("role", ASCENDING), ("status", ASCENDING)],
        name="users_role_status_idx",
    )

    # Plants
    await _create_index_safe(
        db.plants,
        [("seller.email", ASCENDING)],
        name="plants_seller_email_idx",
    )

    # Orders
    await _create_index_safe(
        db.orders,
        [("customer.email", ASCENDING)],
        name="orders_customer_email_idx",
    )
    await _create_index_safe(
        db.orders,
        [("seller.email", ASCENDING)],
        name="orders_seller_email_idx",
    )
