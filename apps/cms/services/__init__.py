from apps.cms.services.layouts import (
    clear_page_content_cache,
    destroy_layout,
    save_layout,
    subtree_page_ids,
)
from apps.cms.services.revisions import prune_revisions, record_revision, restore_from_revision

__all__ = [
    "clear_page_content_cache",
    "destroy_layout",
    "save_layout",
    "subtree_page_ids",
    "prune_revisions",
    "record_revision",
    "restore_from_revision",
]
