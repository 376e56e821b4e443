"""
Print surface: isolate the CV container in a document and print it to PDF.

Isolation works on the document tree the way a browser print of "selected
elements" does: the target and its ancestor chain are preserved, every other
sibling along that chain is suppressed, and a print-media rule hides the
suppressed nodes. `isolate` computes those sets without touching the tree;
`mark_for_print` and `clear_print_marks` apply and remove the marker classes.
"""

import re
import time
import html as html_mod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup

from cvpress.compose import compose
from cvpress.config import ensure_config
from cvpress.cv_models import CVRecord
from cvpress.exceptions import PrintError
from cvpress.logger import log_debug, log_error, log_warning
from cvpress.populate import TemplatePopulator, TemplateRegistry
from cvpress.sections import generate_builtin_cv

try:  # Optional dependency
    import weasyprint  # type: ignore
except Exception:  # pragma: no cover - absence path
    weasyprint = None

PRESERVE_CLASS = 'pe-preserve-print'
SUPPRESS_CLASS = 'pe-no-print'
ANCESTOR_CLASS = 'pe-preserve-ancestor'
PRINT_MARK_CLASSES = (PRESERVE_CLASS, SUPPRESS_CLASS, ANCESTOR_CLASS)

PRINT_CONTAINER_ID = 'tempPrintContainer'
PRINT_FALLBACK_MESSAGE = 'Error generating print preview. Using browser print instead.'

PRINT_CSS = f"""
@media print {{
  .{SUPPRESS_CLASS} {{ display: none !important; }}
  #{PRINT_CONTAINER_ID} {{ position: static !important; left: auto !important; }}
}}
"""

DFLT_PRINT_SHELL = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>CV</title></head>
<body>
<header class="app-header">cvpress</header>
<main id="app"></main>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Isolation


def _element_children(node) -> list:
    # Text nodes (bs4's NavigableString is a str) carry no classes
    return [c for c in getattr(node, 'children', ()) if not isinstance(c, str)]


def _is_boundary(node, root) -> bool:
    if root is not None:
        return node is root
    return getattr(node, 'name', None) == 'body' or node.parent is None


@dataclass(frozen=True)
class PrintIsolation:
    """Nodes to preserve, suppress, and mark as preserved ancestors.

    Membership is by identity, since tree nodes may compare equal by content.
    """

    preserve: tuple
    suppress: tuple
    ancestors: tuple

    def is_preserved(self, node) -> bool:
        return any(n is node for n in self.preserve)

    def is_suppressed(self, node) -> bool:
        return any(n is node for n in self.suppress)

    def is_ancestor(self, node) -> bool:
        return any(n is node for n in self.ancestors)


def isolate(target, *, root=None) -> PrintIsolation:
    """Compute which nodes to keep and hide so only `target` prints.

    Walks from `target` up to, but excluding, `root` (by default the ``body``
    element, or the top of the tree). Works on any tree whose nodes expose
    ``parent`` and ``children``.
    """
    preserve: list = []
    suppress: list = []
    current = target
    while current is not None and not _is_boundary(current, root):
        preserve.append(current)
        parent = current.parent
        if parent is not None:
            for sibling in _element_children(parent):
                if sibling is current or any(sibling is p for p in preserve):
                    continue
                if not any(sibling is s for s in suppress):
                    suppress.append(sibling)
        current = parent
    # every preserved node except the target sits above it
    ancestors = tuple(preserve[1:])
    return PrintIsolation(tuple(preserve), tuple(suppress), ancestors)


def _add_class(tag, name: str) -> None:
    classes = list(tag.get('class') or [])
    if name not in classes:
        classes.append(name)
    tag['class'] = classes


def clear_print_marks(soup) -> None:
    """Remove every print marker class from the document."""
    selector = ', '.join(f'.{c}' for c in PRINT_MARK_CLASSES)
    for tag in soup.select(selector):
        remaining = [c for c in tag.get('class', []) if c not in PRINT_MARK_CLASSES]
        if remaining:
            tag['class'] = remaining
        else:
            del tag['class']


def mark_for_print(soup, target, *, root=None) -> PrintIsolation:
    """Apply the print marker classes for `target`, replacing any previous marks."""
    clear_print_marks(soup)
    isolation = isolate(target, root=root)
    for node in isolation.preserve:
        _add_class(node, PRESERVE_CLASS)
    for node in isolation.suppress:
        _add_class(node, SUPPRESS_CLASS)
    for node in isolation.ancestors:
        _add_class(node, ANCESTOR_CLASS)
    return isolation


# ---------------------------------------------------------------------------
# PDF output


def page_css(record: CVRecord) -> str:
    """``@page`` rule from the record's page options (margins in millimetres)."""
    size = ' '.join(s for s in (record.paperSize or 'letter', record.orientation or '') if s)
    rule = f"size: {size};"
    if record.margin and len(record.margin) == 4:
        rule += ' margin: ' + ' '.join(f"{m:g}mm" for m in record.margin) + ';'
    return f"@page {{ {rule} }}\n"


def html_to_pdf(html: str, css: str = '', *, strict: bool = False) -> bytes:
    """Convert an HTML document to PDF bytes.

    Uses WeasyPrint when installed. Without it, or when it fails and `strict`
    is false, a minimal text-only PDF is built instead.

    Raises:
        PrintError: if WeasyPrint fails and `strict` is true.
    """
    if weasyprint is not None:
        try:
            return weasyprint.HTML(string=html).write_pdf(
                stylesheets=[weasyprint.CSS(string=css)] if css else None,
                presentational_hints=True,
            )
        except Exception as e:
            if strict:
                raise PrintError(f"WeasyPrint failed: {e}") from e
            log_warning(f"WeasyPrint failed, using minimal PDF: {e}")
    text = _extract_text_from_html(html)
    return _build_minimal_pdf(text)


def _extract_text_from_html(html: str) -> str:
    txt = re.sub(r'<(style|script)[^>]*>[\s\S]*?</\1>', ' ', html, flags=re.IGNORECASE)
    txt = re.sub(r'<[^>]+>', ' ', txt)
    txt = html_mod.unescape(txt)
    txt = re.sub(r'\s+', ' ', txt).strip()
    return txt[:4000]  # keep it bounded


def _pdf_text(text: str) -> str:
    # Standard Type1 fonts only cover Latin-1
    text = text.encode('latin-1', 'replace').decode('latin-1')
    return text.replace('\\', r'\\').replace('(', r'\(').replace(')', r'\)')


def _build_minimal_pdf(text: str) -> bytes:
    """Build a minimal, valid single-page PDF containing the given text.

    Not layout-aware; wraps at ~90 chars manually.
    """
    width = 90
    lines = [_pdf_text(text[i : i + width]) for i in range(0, len(text), width)] or ['']
    y = 720
    line_gap = 14
    parts = [f"BT /F1 12 Tf {line_gap} TL 72 {y} Td ({lines[0]}) Tj"]
    for line in lines[1:]:
        y -= line_gap
        if y < 50:
            parts.append("(...) '")
            break
        parts.append(f"({line}) '")
    parts.append("ET")
    stream_text = '\n'.join(parts)
    stream_bytes = stream_text.encode('latin-1')

    def obj(n: int, body: bytes) -> bytes:
        return f"{n} 0 obj\n".encode() + body + b"\nendobj\n"

    # 1 Catalog, 2 Pages, 3 Page, 4 Font, 5 Contents
    objects = [
        obj(1, b"<< /Type /Catalog /Pages 2 0 R >>"),
        obj(2, b"<< /Type /Pages /Count 1 /Kids [3 0 R] >>"),
        obj(
            3,
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        ),
        obj(4, b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>"),
        obj(
            5,
            f"<< /Length {len(stream_bytes)} >>\nstream\n".encode()
            + stream_bytes
            + b"\nendstream",
        ),
    ]

    pdf = b"%PDF-1.4\n"
    offsets = []
    for ob in objects:
        offsets.append(len(pdf))
        pdf += ob
    xref_offset = len(pdf)
    count = len(objects) + 1
    xref_lines = ["xref", f"0 {count}", "0000000000 65535 f "]
    xref_lines += [f"{off:010d} 00000 n " for off in offsets]
    pdf += ("\n".join(xref_lines) + "\n").encode()
    pdf += (
        f"trailer\n<< /Size {count} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF"
    ).encode()
    return pdf


# ---------------------------------------------------------------------------
# Print job


class PrintJob:
    """Print one record with its template, degrading to an unstyled print on failure.

    Steps: populate, compose into ``#tempPrintContainer``, place the container
    in the print shell, mark the tree, convert to PDF. Marks are cleared and
    the container removed afterwards whatever happened.

    >>> job = PrintJob(CVRecord(name='Ada'), {'print_cleanup_delay': 0})
    >>> job.run().startswith(b'%PDF')
    True
    """

    def __init__(
        self,
        record: CVRecord,
        config: Mapping[str, Any] | None = None,
        *,
        populator: TemplatePopulator | None = None,
        template_id: str | None = None,
        shell: str = DFLT_PRINT_SHELL,
        alert: Callable[[str], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.record = record
        self.config = ensure_config(config)
        self.populator = populator or TemplatePopulator(
            registry=TemplateRegistry(templates_dirs=self.config.get('templates_dirs'))
        )
        self._template_id = template_id
        self.shell = shell
        self.alert = alert or log_warning
        self._sleep = sleep
        self.document: BeautifulSoup | None = None

    @property
    def template_id(self) -> str:
        return self._template_id or self.record.template or self.config['template']

    def run(self) -> bytes:
        try:
            return self._print_with_template()
        except Exception as e:
            log_error(f"Error in print with template: {e}")
            self.alert(PRINT_FALLBACK_MESSAGE)
            return self._print_unstyled()

    def _print_with_template(self) -> bytes:
        log_debug(f"Printing with template: {self.template_id}")
        populated = self.populator.populate_cv(self.record, self.template_id)
        page = compose(populated, container_id=PRINT_CONTAINER_ID)

        soup = BeautifulSoup(self.shell, 'html.parser')
        self.document = soup
        body = soup.body or soup
        fragment = BeautifulSoup(page.fragment, 'html.parser')
        for node in list(fragment.contents):
            body.append(node.extract())
        target = soup.find(id=PRINT_CONTAINER_ID)
        if target is None:
            raise PrintError('Print container was not placed in the document')

        try:
            mark_for_print(soup, target)
            css = page_css(self.record) + PRINT_CSS + (self.config.get('custom_css') or '')
            return html_to_pdf(str(soup), css, strict=True)
        finally:
            self._cleanup(soup)

    def _print_unstyled(self) -> bytes:
        """Full-page print of the built-in markup, no template styles."""
        body = generate_builtin_cv(self.record, self.template_id)
        return html_to_pdf(f"<html><body>{body}</body></html>")

    def _cleanup(self, soup) -> None:
        delay = self.config.get('print_cleanup_delay') or 0
        try:
            if delay:
                self._sleep(delay)
            clear_print_marks(soup)
            container = soup.find(id=PRINT_CONTAINER_ID)
            if container is not None:
                container.decompose()
        except Exception as e:  # cleanup is best effort
            log_warning(f"Print cleanup failed: {e}")


def print_cv(record: CVRecord, config=None, **kwargs) -> bytes:
    """Print `record` to PDF bytes (see `PrintJob`)."""
    return PrintJob(record, config, **kwargs).run()
