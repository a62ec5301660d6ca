"""
The check battery

CHECK_BATTERY is the fixed evaluation and report order:
meta, content, images, technical, social, performance.
"""
from typing import Dict, List

from .base import AuditContext, Check, check
from .content import h1_check, heading_hierarchy_check, word_count_check
from .images import alt_text_check, lazy_loading_check
from .meta import canonical_check, description_check, lang_check, title_check
from .performance import page_size_check, response_time_check
from .social import og_description_check, og_image_check, og_title_check, twitter_card_check
from .technical import (
    favicon_check,
    https_check,
    robots_meta_check,
    robots_txt_check,
    sitemap_check,
    structured_data_check,
    viewport_check,
)

CHECK_BATTERY: List[Check] = [
    # Meta
    title_check,
    description_check,
    canonical_check,
    lang_check,
    # Content
    h1_check,
    heading_hierarchy_check,
    word_count_check,
    # Images
    alt_text_check,
    lazy_loading_check,
    # Technical
    https_check,
    viewport_check,
    favicon_check,
    structured_data_check,
    robots_meta_check,
    robots_txt_check,
    sitemap_check,
    # Social
    og_title_check,
    og_image_check,
    og_description_check,
    twitter_card_check,
    # Performance
    response_time_check,
    page_size_check,
]

# Check registry keyed by finding id
CHECK_REGISTRY: Dict[str, Check] = {c.id: c for c in CHECK_BATTERY}

__all__ = [
    "AuditContext",
    "Check",
    "check",
    "CHECK_BATTERY",
    "CHECK_REGISTRY",
]
