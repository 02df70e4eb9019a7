import logging

from app.core.config import settings
from app.render import template as page_template
from app.render.helpers import build_helpers
from app.services.aggregate import aggregate

logger = logging.getLogger(__name__)

async def render_page() -> str:
    """
    Render the root page.

    1. Load the template (TemplateLoadError aborts before any upstream call)
    2. Fetch both feeds concurrently; missing feeds render as empty sections
    3. Render with a helper table built for this call only
    """
    template = await page_template.load_template(settings.TEMPLATE_PATH)

    data = await aggregate(
        settings.NEWS_URL,
        settings.PHRASE_URL,
        settings.NEWS_TIMEOUT_MS,
        phrase_timeout_ms=settings.PHRASE_TIMEOUT_MS,
    )
    logger.debug(
        f"page data: news={'yes' if data.news is not None else 'no'}, "
        f"phrases={'yes' if data.phrases is not None else 'no'}"
    )

    return page_template.render(template, data, build_helpers())
