"""HTML renderer: populated template, composed into the preview page."""

from typing import Any

from cvpress.base import RenderingConfig
from cvpress.compose import ComposedPage, compose
from cvpress.cv_models import CVRecord
from cvpress.populate import TemplatePopulator, TemplateRegistry
from cvpress.printing import PrintJob


class HTMLRenderer:
    """Renders a CV to HTML or PDF.

    Process:
        * Populate the record's template (or fall back to the built-in generator).
        * Compose the preview page around it.
        * If PDF: run a print job over the same populated markup.

    Populators are kept per template search path, so a template file is read
    and parsed once per renderer.
    """

    def __init__(self, *, populator: TemplatePopulator | None = None):
        self._populators: dict[tuple, TemplatePopulator] = {}
        if populator is not None:
            self._populators[tuple(populator.registry.templates_dirs[:-1])] = populator

    def populator_for(self, config: RenderingConfig) -> TemplatePopulator:
        dirs = tuple(str(d) for d in config.templates_dirs or ())
        if dirs not in self._populators:
            self._populators[dirs] = TemplatePopulator(
                registry=TemplateRegistry(templates_dirs=list(dirs))
            )
        return self._populators[dirs]

    # ------------------ Public API ------------------ #
    def render(self, content: CVRecord, config: RenderingConfig) -> bytes:
        if config.format == 'pdf':
            return self._render_pdf(content, config)
        page = self.compose_page(content, config)
        html = page.html
        if config.custom_css:
            html = html.replace('</head>', f"<style>{config.custom_css}</style>\n</head>", 1)
        return html.encode('utf-8')

    def compose_page(self, content: CVRecord, config: RenderingConfig) -> ComposedPage:
        template_id = config.template or content.template
        populated = self.populator_for(config).populate_cv(content, template_id)
        return compose(populated, available_width=config.available_width)

    # ------------------ PDF conversion ------------------ #
    def _render_pdf(self, content: CVRecord, config: RenderingConfig) -> bytes:
        job_config: dict[str, Any] = {
            'templates_dirs': list(config.templates_dirs or []),
            'print_cleanup_delay': config.print_cleanup_delay,
            'custom_css': config.custom_css,
        }
        job = PrintJob(
            content,
            job_config,
            template_id=config.template,
            populator=self.populator_for(config),
        )
        return job.run()
