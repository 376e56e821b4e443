"""
Public API for the cvpress package.
Import the main user-facing functions and classes.
"""

from cvpress.tools import mk_cv, preview_cv, ensure_cv_record
from cvpress.config import load_config, get_default_config
from cvpress.base import RenderingConfig
from cvpress.cv_models import (
    CVRecord,
    EducationEntry,
    ExperienceEntry,
    VolunteerEntry,
    LanguageEntry,
    ProjectEntry,
    TEMPLATES,
    default_record,
)

# Template population and page composition
from cvpress.populate import TemplatePopulator, TemplateRegistry, render_cv_html
from cvpress.compose import compose, extract_body, extract_styles, preview_scale
from cvpress.sections import generate_builtin_cv

# Printing
from cvpress.printing import PrintJob, isolate, print_cv

# Persistence and import/export
from cvpress.store import CVStore, JSONFileStorage, export_json, import_json

# Errors
from cvpress.exceptions import (
    CVPressError,
    TemplateSyntaxError,
    TemplateUnavailableError,
    TypesettingError,
    CVImportError,
    PrintError,
)

__all__ = [
    # Rendering
    'mk_cv',
    'preview_cv',
    'ensure_cv_record',
    'load_config',
    'get_default_config',
    'RenderingConfig',
    # Data model
    'CVRecord',
    'EducationEntry',
    'ExperienceEntry',
    'VolunteerEntry',
    'LanguageEntry',
    'ProjectEntry',
    'TEMPLATES',
    'default_record',
    # Templates
    'TemplatePopulator',
    'TemplateRegistry',
    'render_cv_html',
    'compose',
    'extract_body',
    'extract_styles',
    'preview_scale',
    'generate_builtin_cv',
    # Printing
    'PrintJob',
    'isolate',
    'print_cv',
    # Store
    'CVStore',
    'JSONFileStorage',
    'export_json',
    'import_json',
    # Errors
    'CVPressError',
    'TemplateSyntaxError',
    'TemplateUnavailableError',
    'TypesettingError',
    'CVImportError',
    'PrintError',
]
