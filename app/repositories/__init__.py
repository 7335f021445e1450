"""
Repository layer for the telecalling application.

Repositories encapsulate database query logic. The counter and recycled ID
repositories issue single-statement atomic operations against their tables.
"""

from app.repositories.counter_repository import (
    ensure_baseline,
    increment_and_get,
    get_counter,
    reset_counter,
)

from app.repositories.recycled_id_repository import (
    reclaim_id,
    claim_id,
    list_recycled_ids,
    clear_pool,
)

from app.repositories.telecalling_repository import (
    get_record,
    get_record_by_appointment_id,
    list_records,
    add_record,
    remove_record,
)

__all__ = [
    "ensure_baseline",
    "increment_and_get",
    "get_counter",
    "reset_counter",
    "reclaim_id",
    "claim_id",
    "list_recycled_ids",
    "clear_pool",
    "get_record",
    "get_record_by_appointment_id",
    "list_records",
    "add_record",
    "remove_record",
]
