"""
Image checks: alt text and lazy loading

Both checks may emit nothing: lazy loading is skipped on pages without images,
which changes the number of scorable findings for that page.
"""
from ..document import element_attr
from ..types import Category, Severity
from .base import check

MISSING_ALT_CRITICAL_ABOVE = 5
MISSING_ALT_SHOWN = 5
SRC_DETAIL_LENGTH = 60
LAZY_LOADING_EXPECTED_ABOVE = 5


def missing_alt_sources(images):
    """src (truncated) of every image whose alt is absent or blank"""
    missing = []
    for image in images:
        alt = element_attr(image, "alt")
        if not alt or not alt.strip():
            src = element_attr(image, "src")
            missing.append(src[:SRC_DETAIL_LENGTH] if src else "unknown")
    return missing


@check("img-alt", "Image Alt Text", Category.IMAGES)
def alt_text_check(self, context):
    images = context.document.select("img")
    if not images:
        return self.emit(Severity.INFO, "No images found on page")

    missing = missing_alt_sources(images)
    if missing:
        severity = Severity.CRITICAL if len(missing) > MISSING_ALT_CRITICAL_ABOVE else Severity.WARNING
        return self.emit(
            severity,
            f"{len(missing)}/{len(images)} images missing alt text",
            details=missing[:MISSING_ALT_SHOWN],
            fix="Add descriptive alt text to all images for accessibility and SEO",
        )
    return self.emit(Severity.PASSED, f"All {len(images)} images have alt text")


@check("img-lazy", "Image Lazy Loading", Category.IMAGES)
def lazy_loading_check(self, context):
    total = context.document.count("img")
    if total == 0:
        return None

    lazy = context.document.count('img[loading="lazy"]')
    if total > LAZY_LOADING_EXPECTED_ABOVE and lazy == 0:
        return self.emit(
            Severity.WARNING,
            f"{total} images, none lazy-loaded",
            fix='Add loading="lazy" to below-the-fold images',
        )
    return self.emit(Severity.PASSED, f"{lazy}/{total} images lazy-loaded")
