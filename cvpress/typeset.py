"""Typesetting engine adapter: turns a populated LaTeX document into HTML via pandoc."""

from cvpress.exceptions import TypesettingError
from cvpress.logger import log_debug, log_error

try:  # Optional dependency
    import pypandoc  # type: ignore
except Exception:  # pragma: no cover - absence path
    pypandoc = None


def engine_available() -> bool:
    return pypandoc is not None


def _convert(source: str) -> str:
    if pypandoc is None:
        raise TypesettingError('pypandoc is not installed; cannot typeset LaTeX templates')
    try:
        return pypandoc.convert_text(
            source, 'html', format='latex', extra_args=['--standalone']
        )
    except Exception as e:  # pandoc missing or parse failure
        raise TypesettingError(f"Typesetting failed: {e}") from e


def latex_to_html(source: str) -> str | None:
    """Render a LaTeX document to an HTML document.

    Returns None when the engine is unavailable or fails, which callers treat
    as "no content" and fall back to the built-in generator.
    """
    try:
        html = _convert(source)
    except TypesettingError as e:
        log_error(str(e))
        return None
    log_debug(f"Typeset {len(source)} chars of LaTeX into {len(html)} chars of HTML")
    return html
