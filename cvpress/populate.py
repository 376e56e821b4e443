"""
Template discovery, loading and population.

Pipeline for one render request (no state kept between requests other than
the template cache):

1. acquire the template body (typesetting source first, then markup)
2. evaluate its conditional blocks and placeholders against the record, using
   the generator table of the template's family
3. for typesetting sources, hand the populated LaTeX to the typesetting engine

A template that cannot be acquired, parsed or typeset yields no content, and
`populate_cv` falls back to the built-in generator.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.resources import files
from pathlib import Path

from cvpress.cv_models import (
    TEXT_FIELDS,
    CVRecord,
    TemplateFamily,
    template_family,
)
from cvpress.escaping import escape_html, escape_latex
from cvpress.exceptions import TemplateSyntaxError, TemplateUnavailableError
from cvpress.logger import log_debug, log_error, log_warning
from cvpress.sections import (
    LIST_GENERATORS,
    TIMELINE_GENERATORS,
    TYPESET_GENERATORS,
    generate_builtin_cv,
)
from cvpress.templating import (
    MARKUP,
    TYPESET,
    Node,
    SubstitutionContext,
    parse_template,
    render_nodes,
)
from cvpress.typeset import latex_to_html

packaged_templates = files('cvpress') / 'templates'

# File suffix for each template kind, in resolution order
TEMPLATE_SUFFIXES = ((TYPESET, '.tex'), (MARKUP, '.html'))


@dataclass(frozen=True)
class TemplateSource:
    id: str
    kind: str
    path: str


class TemplateRegistry(Mapping):
    """Registry of template sources found in the template directories.

    A template id maps to ``<id>.tex`` (typesetting) and/or ``<id>.html``
    (markup). Directories given explicitly are searched before the packaged
    templates; files starting with ``_`` are internal and never registered.
    """

    def __init__(self, *, templates_dirs: list[str] | None = None):
        self._dirs = [str(d) for d in templates_dirs or []]
        self._dirs.append(str(packaged_templates))
        self._sources: dict[str, dict[str, TemplateSource]] = {}

        for base in self._dirs:
            if not os.path.isdir(base):
                log_warning(f"Template directory not found: {base}")
                continue
            for entry in sorted(os.listdir(base)):
                if entry.startswith('_'):
                    continue
                stem, suffix = os.path.splitext(entry)
                for kind, kind_suffix in TEMPLATE_SUFFIXES:
                    if suffix == kind_suffix:
                        kinds = self._sources.setdefault(stem, {})
                        # earlier directories win
                        kinds.setdefault(
                            kind, TemplateSource(stem, kind, os.path.join(base, entry))
                        )

    def resolve(self, template_id: str) -> TemplateSource:
        """The source to use for `template_id`: typesetting first, then markup."""
        kinds = self._sources.get(template_id, {})
        for kind, _ in TEMPLATE_SUFFIXES:
            if kind in kinds:
                return kinds[kind]
        raise TemplateUnavailableError(template_id)

    def __getitem__(self, template_id: str) -> TemplateSource:
        try:
            return self.resolve(template_id)
        except TemplateUnavailableError:
            raise KeyError(template_id) from None

    def __iter__(self):
        return iter(self._sources)

    def __len__(self) -> int:
        return len(self._sources)

    @property
    def templates_dirs(self) -> list[str]:
        return list(self._dirs)


@dataclass
class LoadedTemplate:
    id: str
    kind: str
    source: str
    nodes: list[Node] = field(repr=False)


class TemplateCache:
    """Loaded templates keyed by id. Template files are static for a session,
    so entries are never invalidated."""

    def __init__(self):
        self._loaded: dict[str, LoadedTemplate] = {}

    def get(self, template_id: str) -> LoadedTemplate | None:
        return self._loaded.get(template_id)

    def put(self, template: LoadedTemplate) -> None:
        self._loaded[template.id] = template

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._loaded

    def __len__(self) -> int:
        return len(self._loaded)


@dataclass(frozen=True)
class PopulatedCV:
    """Populated markup plus what produced it."""

    html: str
    template_id: str
    family: TemplateFamily
    from_template: bool


class TemplatePopulator:
    """Fills templates with record data. Owns the template cache."""

    def __init__(
        self,
        *,
        registry: TemplateRegistry | None = None,
        cache: TemplateCache | None = None,
    ):
        self._registry = registry or TemplateRegistry()
        self._cache = cache or TemplateCache()

    @property
    def registry(self) -> TemplateRegistry:
        return self._registry

    @property
    def cache(self) -> TemplateCache:
        return self._cache

    def acquire(self, template_id: str) -> LoadedTemplate | None:
        """Load and parse a template, or None when no source is available.

        Raises:
            TemplateSyntaxError: if the template source is malformed.
        """
        cached = self._cache.get(template_id)
        if cached is not None:
            return cached
        try:
            src = self._registry.resolve(template_id)
            text = Path(src.path).read_text(encoding='utf-8')
        except (TemplateUnavailableError, OSError) as e:
            log_warning(f"Template unavailable: {e}")
            return None
        loaded = LoadedTemplate(
            id=template_id,
            kind=src.kind,
            source=text,
            nodes=parse_template(text, template_id),
        )
        self._cache.put(loaded)
        log_debug(f"Loaded {src.kind} template {template_id!r} from {src.path}")
        return loaded

    def family_of(self, loaded: LoadedTemplate) -> TemplateFamily:
        if loaded.kind == TYPESET:
            return TemplateFamily.TYPESET
        return template_family(loaded.id)

    def context_for(
        self, record: CVRecord, family: TemplateFamily
    ) -> SubstitutionContext:
        """Substitution context for one family: exactly one generator table is used."""
        if family is TemplateFamily.TYPESET:
            table, escape = TYPESET_GENERATORS, escape_latex
        elif family is TemplateFamily.TIMELINE:
            table, escape = TIMELINE_GENERATORS, escape_html
        else:
            table, escape = LIST_GENERATORS, escape_html
        scalars = {
            name: getattr(record, name)
            for name in TEXT_FIELDS
            if name not in table
        }
        generators = {name: (lambda fn=fn: fn(record)) for name, fn in table.items()}
        return SubstitutionContext(scalars, generators, escape)

    def populate(self, record: CVRecord, template_id: str | None = None) -> str | None:
        """Populated content for `record`, or None when the template yields nothing."""
        template_id = template_id or record.template
        loaded = self.acquire(template_id)
        if loaded is None:
            return None
        populated = render_nodes(
            loaded.nodes, self.context_for(record, self.family_of(loaded))
        )
        if loaded.kind == TYPESET:
            return latex_to_html(populated)
        return populated

    def populate_cv(
        self, record: CVRecord, template_id: str | None = None
    ) -> PopulatedCV:
        """Like `populate`, but never empty-handed: falls back to the built-in generator."""
        template_id = template_id or record.template
        try:
            html = self.populate(record, template_id)
        except TemplateSyntaxError as e:
            log_error(f"Cannot use template: {e}")
            html = None
        if html is not None and html.strip():
            loaded = self._cache.get(template_id)
            family = self.family_of(loaded) if loaded else template_family(template_id)
            return PopulatedCV(html, template_id, family, from_template=True)
        log_warning(f"Falling back to built-in generator for template {template_id!r}")
        return PopulatedCV(
            generate_builtin_cv(record, template_id),
            template_id,
            TemplateFamily.LIST,
            from_template=False,
        )


def render_cv_html(
    record: CVRecord,
    template_id: str | None = None,
    *,
    populator: TemplatePopulator | None = None,
) -> str:
    """Populated CV markup for `record` (template output or built-in fallback)."""
    populator = populator or TemplatePopulator()
    return populator.populate_cv(record, template_id).html
