from pathlib import Path
from typing import Any, Callable, Dict

from jinja2 import ChainableUndefined, Environment, Template, TemplateSyntaxError
from starlette.concurrency import run_in_threadpool

from app.core.errors import TemplateLoadError
from app.schemas import PageData

# No globals or filters are registered here; helpers travel with each render call.
_env = Environment(autoescape=True, undefined=ChainableUndefined)

async def load_template(path: str) -> Template:
    """Read and compile the template fresh on every call."""
    try:
        source = await run_in_threadpool(Path(path).read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(f"Cannot load template {path}: {e}") from e
    try:
        return _env.from_string(source)
    except TemplateSyntaxError as e:
        raise TemplateLoadError(f"Cannot compile template {path}: {e}") from e

def render(template: Template, data: PageData, helpers: Dict[str, Callable[..., Any]]) -> str:
    return template.render(news=data.news, phrases=data.phrases, **helpers)
