"""File-based JSON storage for generated Vikings.

Data layout:
  data/
    vikings/
      <number>.json     Stored Viking record (names, conditions, statistics)
    images/
      viking_<number>.png  Composited artwork, served under /static

Records are write-once: create_viking() refuses an existing number with
DuplicateVikingError. Only the admin reset path deletes them.
"""

# Re-export all public symbols so `from vikings import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    images_dir,
    init_storage,
    vikings_dir,
)

from .vikings import (  # noqa: F401
    DEFAULT_DESCRIPTION,
    count_vikings,
    create_viking,
    delete_all_vikings,
    delete_viking,
    get_viking,
    list_vikings,
    record_from_specification,
)
